from __future__ import annotations

import structlog

from trivia.game.modes.base import BaseGameMode
from trivia.game.modes.challenge import ChallengeMode
from trivia.game.modes.errors import UnknownModeError
from trivia.game.modes.survival import SurvivalMode
from trivia.game.modes.time_attack import TimeAttackMode
from trivia.game.modes.types import ModeKind

logger = structlog.get_logger("trivia.game.modes.factory")

_MODE_CLASSES: dict[ModeKind, type[BaseGameMode]] = {
    ModeKind.CHALLENGE: ChallengeMode,
    ModeKind.TIME_ATTACK: TimeAttackMode,
    ModeKind.SURVIVAL: SurvivalMode,
}


def resolve_mode_kind(mode: str | ModeKind) -> ModeKind:
    try:
        return ModeKind(mode)
    except ValueError:
        logger.warning("game_mode_unknown", mode=str(mode))
        raise UnknownModeError(mode) from None


def create_game_mode(mode: str | ModeKind) -> BaseGameMode:
    """Builds a session for ``mode``; the caller invokes ``on_game_start``."""
    return _MODE_CLASSES[resolve_mode_kind(mode)]()


def start_game_mode(mode: str | ModeKind) -> BaseGameMode:
    game_mode = create_game_mode(mode)
    game_mode.on_game_start()
    return game_mode
