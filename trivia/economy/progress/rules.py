from __future__ import annotations

from dataclasses import replace

from trivia.economy.progress.errors import UnknownChallengeLevelError
from trivia.economy.progress.types import ChallengeLevel, ChallengeLevelOutcome, ModeStatsSnapshot
from trivia.game.modes.types import ModeKind
from trivia.game.sessions.types import RunResult

FIRST_LEVEL_ID = 1
REVIVE_GOLD_COST = 300
TIME_ATTACK_BASE_GOLD = 20

CHALLENGE_LEVELS: tuple[ChallengeLevel, ...] = (
    ChallengeLevel(level_id=1, name="Old Testament", questions=20, reward=50),
    ChallengeLevel(level_id=2, name="New Testament", questions=25, reward=60),
    ChallengeLevel(level_id=3, name="Prophets", questions=30, reward=70),
    ChallengeLevel(level_id=4, name="Parables of Jesus", questions=35, reward=80),
    ChallengeLevel(level_id=5, name="Miracles", questions=40, reward=90),
)
_LEVELS_BY_ID = {level.level_id: level for level in CHALLENGE_LEVELS}


def get_challenge_level(level_id: int) -> ChallengeLevel:
    level = _LEVELS_BY_ID.get(level_id)
    if level is None:
        raise UnknownChallengeLevelError(f"unknown challenge level: {level_id}")
    return level


def next_level_id(level_id: int) -> int | None:
    candidate = level_id + 1
    return candidate if candidate in _LEVELS_BY_ID else None


def time_attack_gold(score: int) -> int:
    return max(0, score) + TIME_ATTACK_BASE_GOLD


def challenge_percentage(score: int, total_questions: int) -> int:
    if total_questions <= 0:
        return 0
    return round(score * 100 / total_questions)


def evaluate_challenge_level(
    level: ChallengeLevel,
    *,
    score: int,
    total_questions: int,
    completed: bool,
) -> ChallengeLevelOutcome:
    percentage = challenge_percentage(score, total_questions)
    perfect = percentage == 100
    if not (completed and perfect):
        return ChallengeLevelOutcome(
            percentage=percentage,
            perfect=perfect,
            gold_awarded=0,
            unlock_level_id=None,
            badge_level_id=None,
        )

    return ChallengeLevelOutcome(
        percentage=percentage,
        perfect=True,
        gold_awarded=level.reward,
        unlock_level_id=next_level_id(level.level_id),
        badge_level_id=level.level_id,
    )


def gold_for_result(result: RunResult, *, level: ChallengeLevel | None = None) -> int:
    if result.mode is ModeKind.TIME_ATTACK:
        return time_attack_gold(result.score)
    if result.mode is ModeKind.CHALLENGE and level is not None:
        return evaluate_challenge_level(
            level,
            score=result.score,
            total_questions=result.total_questions,
            completed=result.completed,
        ).gold_awarded
    return 0


def merge_stats(snapshot: ModeStatsSnapshot, result: RunResult) -> ModeStatsSnapshot:
    return replace(
        snapshot,
        games_played=snapshot.games_played + 1,
        best_score=max(snapshot.best_score, result.score),
        best_points=max(snapshot.best_points, result.points),
        total_questions=snapshot.total_questions + result.answered,
        correct_answers=snapshot.correct_answers + result.score,
        best_streak=max(snapshot.best_streak, result.best_streak),
        games_with_revive=snapshot.games_with_revive + (1 if result.revived else 0),
    )
