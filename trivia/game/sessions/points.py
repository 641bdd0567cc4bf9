from __future__ import annotations

from trivia.game.modes.types import ModeKind

BASE_POINTS = 100
STREAK_MULTIPLIERS: tuple[tuple[int, float], ...] = (
    (14, 2.0),
    (9, 1.5),
    (4, 1.2),
)
SPEED_BONUSES: tuple[tuple[float, int], ...] = (
    (1.5, 100),
    (3.0, 50),
)


def streak_multiplier(correct_streak: int) -> float:
    for threshold, multiplier in STREAK_MULTIPLIERS:
        if correct_streak >= threshold:
            return multiplier
    return 1.0


def speed_bonus(response_time_sec: float) -> int:
    for limit_sec, bonus in SPEED_BONUSES:
        if response_time_sec < limit_sec:
            return bonus
    return 0


def calculate_points(
    *,
    mode: ModeKind,
    is_correct: bool,
    correct_streak: int,
    response_time_sec: float,
) -> int:
    """Points for one answer; ``correct_streak`` is the run streak before it."""
    if not is_correct:
        return 0
    if mode is not ModeKind.TIME_ATTACK:
        return BASE_POINTS
    points = BASE_POINTS * streak_multiplier(correct_streak) + speed_bonus(response_time_sec)
    return round(points)
