from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ChallengeLevel:
    level_id: int
    name: str
    questions: int
    reward: int


@dataclass(slots=True)
class ModeStatsSnapshot:
    games_played: int = 0
    best_score: int = 0
    best_points: int = 0
    total_questions: int = 0
    correct_answers: int = 0
    best_streak: int = 0
    games_with_revive: int = 0

    @property
    def accuracy_percent(self) -> int:
        if self.total_questions <= 0:
            return 0
        return round(self.correct_answers * 100 / self.total_questions)


@dataclass(slots=True)
class ChallengeLevelOutcome:
    percentage: int
    perfect: bool
    gold_awarded: int
    unlock_level_id: int | None
    badge_level_id: int | None


@dataclass(slots=True)
class GameRewardResult:
    gold_awarded: int
    gold_balance: int
    stats: ModeStatsSnapshot
    unlocked_level_id: int | None = None
    badge_awarded: bool = False


@dataclass(slots=True)
class RevivePaymentResult:
    gold_spent: int
    gold_balance: int


@dataclass(slots=True)
class LeaderboardEntry:
    rank: int
    user_id: int
    best_score: int
    best_points: int
    games_played: int
