from __future__ import annotations

from typing import cast

from trivia.game.modes.catalog import GAME_MODES_CONFIG
from trivia.game.modes.constants import (
    SURVIVAL_MAX_CONSECUTIVE_WRONG,
    TIME_ATTACK_STREAK_BONUS_SEC,
    TIME_ATTACK_STREAK_LENGTH,
)
from trivia.game.modes.types import ChallengeStatus, GameStatus, ModeKind, SurvivalStatus, TimeAttackStatus
from trivia.game.sessions.points import streak_multiplier

STREAK_TIER_LABELS: dict[float, str] = {
    2.0: "INSANE STREAK!",
    1.5: "GREAT STREAK!",
    1.2: "GOOD STREAK!",
}


def display_mode_label(mode_code: str) -> str:
    config = GAME_MODES_CONFIG.get(mode_code)
    if config is not None:
        return f"{config.icon} {config.name}"
    return mode_code.replace("_", " ").title()


def format_clock(seconds: int) -> str:
    seconds = max(0, seconds)
    return f"{seconds // 60}:{seconds % 60:02d}"


def streak_banner(correct_streak: int, run_streak: int = 0) -> str:
    """Bonus progress, or the point multiplier the next answer earns once one applies."""
    multiplier = streak_multiplier(run_streak)
    if multiplier > 1.0:
        return f"{STREAK_TIER_LABELS[multiplier]} x{multiplier:.1f}"

    banner = f"Streak: {correct_streak}/{TIME_ATTACK_STREAK_LENGTH}"
    if correct_streak == TIME_ATTACK_STREAK_LENGTH - 1:
        banner += f" (Next: +{TIME_ATTACK_STREAK_BONUS_SEC}s!)"
    return banner


def status_line(status: GameStatus, *, run_streak: int = 0) -> str:
    if status.kind is ModeKind.CHALLENGE:
        lives = cast(ChallengeStatus, status).lives
        return "❤️" * lives if lives > 0 else "No lives left"
    if status.kind is ModeKind.TIME_ATTACK:
        clock = cast(TimeAttackStatus, status)
        return f"⏱️ {format_clock(clock.time_remaining)} | {streak_banner(clock.correct_streak, run_streak)}"
    strikes = cast(SurvivalStatus, status).consecutive_wrong
    return f"Strikes: {strikes}/{SURVIVAL_MAX_CONSECUTIVE_WRONG}"
