from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from trivia.game.modes.constants import MODE_CHALLENGE, MODE_SURVIVAL, MODE_TIME_ATTACK


class ModeKind(str, Enum):
    CHALLENGE = MODE_CHALLENGE
    TIME_ATTACK = MODE_TIME_ATTACK
    SURVIVAL = MODE_SURVIVAL


@dataclass(frozen=True, slots=True)
class GameModeConfig:
    name: str
    icon: str
    description: str
    features: tuple[str, ...]
    time_per_question: int | None = None
    total_time: int | None = None
    initial_lives: int | None = None
    questions_to_load: int | None = None


@dataclass(frozen=True, slots=True)
class QuestionResult:
    is_correct: bool
    time_taken: float


@dataclass(slots=True)
class GameState:
    score: int = 0
    is_game_over: bool = False
    game_over_reason: str | None = None
    show_continue_option: bool = False

    def copy(self) -> GameState:
        return replace(self)


@dataclass(slots=True)
class ChallengeStatus:
    lives: int
    kind: ModeKind = field(default=ModeKind.CHALLENGE, init=False)


@dataclass(slots=True)
class TimeAttackStatus:
    time_remaining: int
    correct_streak: int
    kind: ModeKind = field(default=ModeKind.TIME_ATTACK, init=False)


@dataclass(slots=True)
class SurvivalStatus:
    consecutive_wrong: int
    kind: ModeKind = field(default=ModeKind.SURVIVAL, init=False)


GameStatus = ChallengeStatus | TimeAttackStatus | SurvivalStatus
