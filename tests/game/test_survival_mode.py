from __future__ import annotations

from trivia.game.modes.survival import SurvivalMode
from trivia.game.modes.types import ModeKind, QuestionResult, SurvivalStatus

CORRECT = QuestionResult(is_correct=True, time_taken=1.0)
WRONG = QuestionResult(is_correct=False, time_taken=1.0)


def started() -> SurvivalMode:
    mode = SurvivalMode()
    mode.on_game_start()
    return mode


def test_survival_has_ten_second_question_timer() -> None:
    mode = started()

    assert mode.should_show_timer() is True
    assert mode.get_timer_seconds() == 10
    assert mode.get_game_status() == SurvivalStatus(consecutive_wrong=0)
    assert mode.get_game_status().kind is ModeKind.SURVIVAL


def test_correct_answer_clears_strikes() -> None:
    mode = started()
    mode.on_incorrect_answer(WRONG)
    mode.on_incorrect_answer(WRONG)

    state = mode.on_correct_answer(CORRECT)

    assert state.score == 1
    assert mode.get_game_status().consecutive_wrong == 0


def test_three_wrong_in_a_row_after_a_correct_answer_end_the_game() -> None:
    mode = started()

    mode.on_incorrect_answer(WRONG)
    mode.on_correct_answer(CORRECT)
    mode.on_incorrect_answer(WRONG)
    mode.on_incorrect_answer(WRONG)
    assert mode.get_game_state().is_game_over is False
    state = mode.on_incorrect_answer(WRONG)

    assert state.is_game_over is True
    assert state.game_over_reason == "3 wrong answers in a row"
    assert state.show_continue_option is False
    assert mode.get_game_status().consecutive_wrong == 3


def test_time_up_counts_as_a_strike() -> None:
    mode = started()

    mode.on_time_up()
    mode.on_time_up()
    state = mode.on_time_up()

    assert state.is_game_over is True
    assert state.game_over_reason == "3 wrong answers in a row"


def test_strikes_never_exceed_three() -> None:
    mode = started()
    for _ in range(3):
        mode.on_incorrect_answer(WRONG)

    mode.on_incorrect_answer(WRONG)
    mode.on_time_up()
    mode.on_correct_answer(CORRECT)

    assert mode.get_game_status().consecutive_wrong == 3
    assert mode.get_game_state().score == 0
