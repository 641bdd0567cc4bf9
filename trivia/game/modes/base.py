"""Shared contract for game-mode sessions.

A session owns score, terminal flag and its mode-private counters. Every
mutating call returns a fresh ``GameState`` copy; once the session is over,
answer events are absorbed without touching any counter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

import structlog

from trivia.game.modes.types import GameModeConfig, GameState, GameStatus, ModeKind, QuestionResult

logger = structlog.get_logger("trivia.game.modes")


class BaseGameMode(ABC):
    kind: ClassVar[ModeKind]

    def __init__(self, config: GameModeConfig) -> None:
        self._config = config
        self._state = GameState()
        self._reset_counters()

    @property
    def is_game_over(self) -> bool:
        return self._state.is_game_over

    def on_game_start(self) -> None:
        self._state = GameState()
        self._reset_counters()
        logger.debug("game_mode_started", mode=self.kind.value)

    def on_correct_answer(self, result: QuestionResult) -> GameState:
        if self._absorb_if_over("correct_answer"):
            return self.get_game_state()
        self._state.score += 1
        self._apply_correct(result)
        return self.get_game_state()

    def on_incorrect_answer(self, result: QuestionResult) -> GameState:
        if self._absorb_if_over("incorrect_answer"):
            return self.get_game_state()
        self._apply_incorrect(result)
        return self.get_game_state()

    def on_time_up(self) -> GameState:
        return self.on_incorrect_answer(
            QuestionResult(is_correct=False, time_taken=float(self._config.time_per_question or 0))
        )

    def get_game_state(self) -> GameState:
        return self._state.copy()

    def get_config(self) -> GameModeConfig:
        return self._config

    def should_show_timer(self) -> bool:
        return self._config.time_per_question is not None

    def get_timer_seconds(self) -> int | None:
        return self._config.time_per_question

    @abstractmethod
    def get_game_status(self) -> GameStatus:
        raise NotImplementedError

    @abstractmethod
    def _reset_counters(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def _apply_correct(self, result: QuestionResult) -> None:
        raise NotImplementedError

    @abstractmethod
    def _apply_incorrect(self, result: QuestionResult) -> None:
        raise NotImplementedError

    def _absorb_if_over(self, event: str) -> bool:
        if not self._state.is_game_over:
            return False
        logger.debug(
            "game_mode_event_ignored",
            mode=self.kind.value,
            ignored_event=event,
            reason=self._state.game_over_reason,
        )
        return True

    def _finish(self, reason: str, *, continuable: bool = False) -> None:
        if self._state.is_game_over:
            return
        self._state.is_game_over = True
        self._state.game_over_reason = reason
        self._state.show_continue_option = continuable
        logger.info(
            "game_mode_over",
            mode=self.kind.value,
            score=self._state.score,
            reason=reason,
            continuable=continuable,
        )
