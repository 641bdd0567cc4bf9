from __future__ import annotations

import structlog

from trivia.game.modes.base import BaseGameMode
from trivia.game.modes.constants import (
    CHALLENGE_INITIAL_LIVES,
    CHALLENGE_REVIVE_LIVES,
    CHALLENGE_TIME_PER_QUESTION_SEC,
    GAME_OVER_REASON_NO_LIVES,
)
from trivia.game.modes.types import ChallengeStatus, GameModeConfig, ModeKind, QuestionResult

logger = structlog.get_logger("trivia.game.modes.challenge")

CHALLENGE_CONFIG = GameModeConfig(
    name="Challenge Mode",
    icon="🛡️",
    description="Get as far as you can with 3 lives",
    features=("3 lives", "15 seconds per question", "Watch ads to continue"),
    time_per_question=CHALLENGE_TIME_PER_QUESTION_SEC,
    initial_lives=CHALLENGE_INITIAL_LIVES,
)


class ChallengeMode(BaseGameMode):
    kind = ModeKind.CHALLENGE

    def __init__(self) -> None:
        super().__init__(CHALLENGE_CONFIG)

    @property
    def lives(self) -> int:
        return self._lives

    def get_game_status(self) -> ChallengeStatus:
        return ChallengeStatus(lives=self._lives)

    def revive(self) -> None:
        """Brings a finished session back with one life; score is kept."""
        if not self._state.is_game_over:
            logger.debug("game_mode_revive_ignored", mode=self.kind.value, lives=self._lives)
            return
        self._lives = CHALLENGE_REVIVE_LIVES
        self._state.is_game_over = False
        self._state.game_over_reason = None
        self._state.show_continue_option = False
        logger.info("game_mode_revived", mode=self.kind.value, score=self._state.score, lives=self._lives)

    def _reset_counters(self) -> None:
        self._lives = self._config.initial_lives or CHALLENGE_INITIAL_LIVES

    def _apply_correct(self, result: QuestionResult) -> None:
        return None

    def _apply_incorrect(self, result: QuestionResult) -> None:
        self._lives = max(0, self._lives - 1)
        if self._lives <= 0:
            self._finish(GAME_OVER_REASON_NO_LIVES, continuable=True)
