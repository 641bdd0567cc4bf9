from __future__ import annotations

from dataclasses import dataclass

from trivia.game.modes.types import GameState, GameStatus, ModeKind


@dataclass(slots=True)
class AnswerOutcome:
    question_id: str
    accepted: bool
    is_correct: bool
    selected_option: int | None
    correct_option: int
    points_awarded: int
    state: GameState
    status: GameStatus
    finished: bool


@dataclass(slots=True)
class RunResult:
    mode: ModeKind
    score: int
    points: int
    total_questions: int
    answered: int
    completed: bool
    best_streak: int
    revived: bool = False
    game_over_reason: str | None = None
