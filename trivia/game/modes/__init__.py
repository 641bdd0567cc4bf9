from trivia.game.modes.base import BaseGameMode
from trivia.game.modes.catalog import GAME_MODES_CONFIG, SELECTABLE_MODES, is_mode_implemented
from trivia.game.modes.challenge import ChallengeMode
from trivia.game.modes.errors import GameModeError, UnknownModeError
from trivia.game.modes.factory import create_game_mode, start_game_mode
from trivia.game.modes.survival import SurvivalMode
from trivia.game.modes.time_attack import TimeAttackMode
from trivia.game.modes.types import (
    ChallengeStatus,
    GameModeConfig,
    GameState,
    GameStatus,
    ModeKind,
    QuestionResult,
    SurvivalStatus,
    TimeAttackStatus,
)

__all__ = [
    "GAME_MODES_CONFIG",
    "SELECTABLE_MODES",
    "BaseGameMode",
    "ChallengeMode",
    "ChallengeStatus",
    "GameModeConfig",
    "GameModeError",
    "GameState",
    "GameStatus",
    "ModeKind",
    "QuestionResult",
    "SurvivalMode",
    "SurvivalStatus",
    "TimeAttackMode",
    "TimeAttackStatus",
    "UnknownModeError",
    "create_game_mode",
    "is_mode_implemented",
    "start_game_mode",
]
