from __future__ import annotations

from trivia.game.modes.base import BaseGameMode
from trivia.game.modes.constants import (
    GAME_OVER_REASON_STRIKES,
    SURVIVAL_MAX_CONSECUTIVE_WRONG,
    SURVIVAL_TIME_PER_QUESTION_SEC,
)
from trivia.game.modes.types import GameModeConfig, ModeKind, QuestionResult, SurvivalStatus

SURVIVAL_CONFIG = GameModeConfig(
    name="Survival Mode",
    icon="🔥",
    description="Keep going! But 3 wrong answers in a row and you're out",
    features=(
        "3 strikes rule",
        "10 seconds per question",
        "Increasing difficulty",
    ),
    time_per_question=SURVIVAL_TIME_PER_QUESTION_SEC,
)


class SurvivalMode(BaseGameMode):
    kind = ModeKind.SURVIVAL

    def __init__(self) -> None:
        super().__init__(SURVIVAL_CONFIG)

    @property
    def consecutive_wrong(self) -> int:
        return self._consecutive_wrong

    def get_game_status(self) -> SurvivalStatus:
        return SurvivalStatus(consecutive_wrong=self._consecutive_wrong)

    def _reset_counters(self) -> None:
        self._consecutive_wrong = 0

    def _apply_correct(self, result: QuestionResult) -> None:
        self._consecutive_wrong = 0

    def _apply_incorrect(self, result: QuestionResult) -> None:
        self._consecutive_wrong += 1
        if self._consecutive_wrong >= SURVIVAL_MAX_CONSECUTIVE_WRONG:
            self._finish(GAME_OVER_REASON_STRIKES)
