from __future__ import annotations

import structlog

from trivia.game.modes.base import BaseGameMode
from trivia.game.modes.constants import (
    GAME_OVER_REASON_TIME_UP,
    TIME_ATTACK_STREAK_BONUS_SEC,
    TIME_ATTACK_STREAK_LENGTH,
    TIME_ATTACK_TOTAL_TIME_SEC,
    TIME_ATTACK_WRONG_PENALTY_SEC,
)
from trivia.game.modes.types import GameModeConfig, GameState, ModeKind, QuestionResult, TimeAttackStatus

logger = structlog.get_logger("trivia.game.modes.time_attack")

TIME_ATTACK_CONFIG = GameModeConfig(
    name="Time Attack",
    icon="⚡",
    description="Answer as many questions as possible in 1 minute",
    features=(
        "-3 seconds for wrong answers",
        "+3 seconds for 3 correct streak",
        "Beat your high score",
    ),
    total_time=TIME_ATTACK_TOTAL_TIME_SEC,
)


class TimeAttackMode(BaseGameMode):
    """One shared clock instead of lives.

    The clock drains through ``tick`` (driven once per second by the runner)
    and through wrong-answer penalties. Whichever path brings it to zero ends
    the session; the other path then finds the session over and does nothing.
    """

    kind = ModeKind.TIME_ATTACK

    def __init__(self) -> None:
        super().__init__(TIME_ATTACK_CONFIG)

    @property
    def time_remaining(self) -> int:
        return self._time_remaining

    @property
    def correct_streak(self) -> int:
        return self._correct_streak

    @property
    def is_stopped(self) -> bool:
        return self._stopped

    def get_game_status(self) -> TimeAttackStatus:
        return TimeAttackStatus(time_remaining=self._time_remaining, correct_streak=self._correct_streak)

    def on_time_up(self) -> GameState:
        # Questions do not expire on their own in this mode.
        return self.get_game_state()

    def tick(self) -> bool:
        if self._stopped or self._state.is_game_over:
            return False
        self._time_remaining = max(0, self._time_remaining - 1)
        if self._time_remaining <= 0:
            self._finish(GAME_OVER_REASON_TIME_UP)
            return False
        return True

    def stop(self) -> None:
        self._stopped = True

    def resume(self) -> None:
        self._stopped = False

    def _reset_counters(self) -> None:
        self._time_remaining = self._config.total_time or TIME_ATTACK_TOTAL_TIME_SEC
        self._correct_streak = 0
        self._stopped = False

    def _apply_correct(self, result: QuestionResult) -> None:
        self._correct_streak += 1
        if self._correct_streak == TIME_ATTACK_STREAK_LENGTH:
            self._time_remaining += TIME_ATTACK_STREAK_BONUS_SEC
            self._correct_streak = 0
            logger.debug(
                "time_attack_streak_bonus",
                bonus_sec=TIME_ATTACK_STREAK_BONUS_SEC,
                time_remaining=self._time_remaining,
            )

    def _apply_incorrect(self, result: QuestionResult) -> None:
        self._correct_streak = 0
        self._time_remaining = max(0, self._time_remaining - TIME_ATTACK_WRONG_PENALTY_SEC)
        if self._time_remaining <= 0:
            self._finish(GAME_OVER_REASON_TIME_UP)
