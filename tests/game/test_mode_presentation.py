from __future__ import annotations

import pytest

from trivia.game.modes.catalog import GAME_MODES_CONFIG, SELECTABLE_MODES, is_mode_implemented
from trivia.game.modes.presentation import display_mode_label, format_clock, status_line, streak_banner
from trivia.game.modes.types import ChallengeStatus, SurvivalStatus, TimeAttackStatus


def test_catalog_lists_implemented_modes_in_selection_order() -> None:
    assert list(GAME_MODES_CONFIG) == ["challenge", "timeAttack", "survival"]
    assert SELECTABLE_MODES[-1] == "blitz"
    assert GAME_MODES_CONFIG["challenge"].initial_lives == 3
    assert GAME_MODES_CONFIG["timeAttack"].total_time == 60
    assert GAME_MODES_CONFIG["survival"].time_per_question == 10


@pytest.mark.parametrize(
    ("mode_code", "expected"),
    [
        ("challenge", True),
        ("timeAttack", True),
        ("survival", True),
        ("blitz", False),
    ],
)
def test_is_mode_implemented(mode_code: str, expected: bool) -> None:
    assert is_mode_implemented(mode_code) is expected


def test_display_mode_label() -> None:
    assert display_mode_label("timeAttack") == "⚡ Time Attack"
    assert display_mode_label("blitz") == "Blitz"


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, "0:00"),
        (9, "0:09"),
        (60, "1:00"),
        (63, "1:03"),
        (-4, "0:00"),
    ],
)
def test_format_clock(seconds: int, expected: str) -> None:
    assert format_clock(seconds) == expected


def test_streak_banner_hints_bonus_one_answer_early() -> None:
    assert streak_banner(0) == "Streak: 0/3"
    assert streak_banner(1) == "Streak: 1/3"
    assert streak_banner(2) == "Streak: 2/3 (Next: +3s!)"


def test_status_line_dispatches_on_kind() -> None:
    assert status_line(ChallengeStatus(lives=2)) == "❤️❤️"
    assert status_line(ChallengeStatus(lives=0)) == "No lives left"
    assert status_line(TimeAttackStatus(time_remaining=63, correct_streak=2)) == "⏱️ 1:03 | Streak: 2/3 (Next: +3s!)"
    assert status_line(SurvivalStatus(consecutive_wrong=1)) == "Strikes: 1/3"


@pytest.mark.parametrize(
    ("run_streak", "expected"),
    [
        (3, "Streak: 0/3"),
        (4, "GOOD STREAK! x1.2"),
        (9, "GREAT STREAK! x1.5"),
        (14, "INSANE STREAK! x2.0"),
        (30, "INSANE STREAK! x2.0"),
    ],
)
def test_streak_banner_shows_point_multiplier_tiers(run_streak: int, expected: str) -> None:
    assert streak_banner(0, run_streak) == expected


def test_status_line_reports_multiplier_for_time_attack_run() -> None:
    status = TimeAttackStatus(time_remaining=41, correct_streak=1)

    assert status_line(status, run_streak=10) == "⏱️ 0:41 | GREAT STREAK! x1.5"
    assert status_line(SurvivalStatus(consecutive_wrong=0), run_streak=10) == "Strikes: 0/3"
