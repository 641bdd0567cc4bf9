from __future__ import annotations

import asyncio
import time
from typing import Callable, Sequence, cast

import structlog

from trivia.core.config import get_settings
from trivia.game.modes.base import BaseGameMode
from trivia.game.modes.challenge import ChallengeMode
from trivia.game.modes.time_attack import TimeAttackMode
from trivia.game.modes.types import GameState, ModeKind, QuestionResult
from trivia.game.questions.types import QuizQuestion
from trivia.game.sessions.errors import InvalidAnswerOptionError, ReviveNotAvailableError
from trivia.game.sessions.points import calculate_points
from trivia.game.sessions.types import AnswerOutcome, RunResult

logger = structlog.get_logger("trivia.game.sessions.runner")


class QuizRunner:
    """Drives one game-mode session over an ordered list of questions.

    The session decides scoring and termination; the runner owns the
    question cursor, points, the per-question stopwatch and the single
    end-of-run notification. Events arriving after the run ended are
    absorbed and reported with ``accepted=False``.
    """

    def __init__(
        self,
        game_mode: BaseGameMode,
        questions: Sequence[QuizQuestion],
        *,
        clock: Callable[[], float] = time.monotonic,
        on_finish: Callable[[RunResult], None] | None = None,
    ) -> None:
        self._game_mode = game_mode
        self._questions = tuple(questions)
        self._clock = clock
        self._on_finish = on_finish
        self._reset()

    def _reset(self) -> None:
        self._cursor = 0
        self._points = 0
        self._answered = 0
        self._current_streak = 0
        self._best_streak = 0
        self._finished = False
        self._completed = False
        self._revived = False
        self._question_started_at = self._clock()

    @property
    def game_mode(self) -> BaseGameMode:
        return self._game_mode

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def points(self) -> int:
        return self._points

    @property
    def current_streak(self) -> int:
        return self._current_streak

    @property
    def total_questions(self) -> int:
        return len(self._questions)

    @property
    def question_number(self) -> int:
        return min(self._cursor + 1, len(self._questions))

    @property
    def current_question(self) -> QuizQuestion | None:
        if self._finished or self._cursor >= len(self._questions):
            return None
        return self._questions[self._cursor]

    def start(self) -> None:
        self._game_mode.on_game_start()
        self._reset()
        if not self._questions:
            self._finish(completed=True)

    def submit_answer(self, option_index: int) -> AnswerOutcome:
        question = self.current_question
        if question is None:
            return self._ignored_outcome(selected_option=option_index)
        if not 0 <= option_index < len(question.options):
            raise InvalidAnswerOptionError(
                f"option {option_index} is out of range for question {question.question_id}"
            )

        time_taken = max(0.0, self._clock() - self._question_started_at)
        is_correct = option_index == question.correct_option
        result = QuestionResult(is_correct=is_correct, time_taken=time_taken)

        points_awarded = 0
        if is_correct:
            points_awarded = calculate_points(
                mode=self._game_mode.kind,
                is_correct=True,
                correct_streak=self._current_streak,
                response_time_sec=time_taken,
            )
            state = self._game_mode.on_correct_answer(result)
            self._current_streak += 1
            self._best_streak = max(self._best_streak, self._current_streak)
            self._points += points_awarded
        else:
            state = self._game_mode.on_incorrect_answer(result)
            self._current_streak = 0

        self._answered += 1
        self._advance(state)
        return AnswerOutcome(
            question_id=question.question_id,
            accepted=True,
            is_correct=is_correct,
            selected_option=option_index,
            correct_option=question.correct_option,
            points_awarded=points_awarded,
            state=state,
            status=self._game_mode.get_game_status(),
            finished=self._finished,
        )

    def time_up(self) -> AnswerOutcome:
        question = self.current_question
        if question is None:
            return self._ignored_outcome(selected_option=None)

        state = self._game_mode.on_time_up()
        if self._game_mode.should_show_timer():
            self._current_streak = 0
            self._answered += 1
            self._advance(state)
        return AnswerOutcome(
            question_id=question.question_id,
            accepted=True,
            is_correct=False,
            selected_option=None,
            correct_option=question.correct_option,
            points_awarded=0,
            state=state,
            status=self._game_mode.get_game_status(),
            finished=self._finished,
        )

    def tick(self) -> bool:
        if self._finished or self._game_mode.kind is not ModeKind.TIME_ATTACK:
            return False
        time_attack = cast(TimeAttackMode, self._game_mode)
        alive = time_attack.tick()
        if not alive and time_attack.is_game_over:
            self._finish(completed=False)
        return alive

    async def run_clock(self, interval: float | None = None) -> None:
        """Ticks the shared clock until the run ends or the clock is stopped.

        A paused clock ends this loop; call it again after ``resume``.
        """
        tick_seconds = interval if interval is not None else get_settings().clock_tick_seconds
        while not self._finished:
            await asyncio.sleep(tick_seconds)
            if not self.tick():
                break

    def revive(self) -> GameState:
        if self._game_mode.kind is not ModeKind.CHALLENGE or not self._game_mode.is_game_over:
            raise ReviveNotAvailableError(f"cannot revive a {self._game_mode.kind.value} run in this state")

        cast(ChallengeMode, self._game_mode).revive()
        self._finished = False
        self._revived = True
        self._question_started_at = self._clock()
        if self._cursor >= len(self._questions):
            self._finish(completed=True)
        return self._game_mode.get_game_state()

    def result(self) -> RunResult:
        state = self._game_mode.get_game_state()
        return RunResult(
            mode=self._game_mode.kind,
            score=state.score,
            points=self._points,
            total_questions=len(self._questions),
            answered=self._answered,
            completed=self._completed,
            best_streak=self._best_streak,
            revived=self._revived,
            game_over_reason=state.game_over_reason,
        )

    def _advance(self, state: GameState) -> None:
        self._cursor += 1
        self._question_started_at = self._clock()
        if state.is_game_over:
            self._finish(completed=False)
        elif self._cursor >= len(self._questions):
            self._finish(completed=True)

    def _finish(self, *, completed: bool) -> None:
        if self._finished:
            return
        self._finished = True
        self._completed = completed
        if self._game_mode.kind is ModeKind.TIME_ATTACK:
            cast(TimeAttackMode, self._game_mode).stop()

        result = self.result()
        logger.info(
            "quiz_run_finished",
            mode=result.mode.value,
            score=result.score,
            points=result.points,
            answered=result.answered,
            completed=result.completed,
            reason=result.game_over_reason,
        )
        if self._on_finish is not None:
            self._on_finish(result)

    def _ignored_outcome(self, *, selected_option: int | None) -> AnswerOutcome:
        logger.debug("quiz_run_event_ignored", mode=self._game_mode.kind.value, selected_option=selected_option)
        last_question = self._questions[min(self._cursor, len(self._questions) - 1)] if self._questions else None
        return AnswerOutcome(
            question_id=last_question.question_id if last_question is not None else "",
            accepted=False,
            is_correct=False,
            selected_option=selected_option,
            correct_option=last_question.correct_option if last_question is not None else -1,
            points_awarded=0,
            state=self._game_mode.get_game_state(),
            status=self._game_mode.get_game_status(),
            finished=self._finished,
        )
