from __future__ import annotations

from trivia.game.modes.challenge import CHALLENGE_CONFIG
from trivia.game.modes.constants import MODE_BLITZ, MODE_CHALLENGE, MODE_SURVIVAL, MODE_TIME_ATTACK
from trivia.game.modes.survival import SURVIVAL_CONFIG
from trivia.game.modes.time_attack import TIME_ATTACK_CONFIG
from trivia.game.modes.types import GameModeConfig

GAME_MODES_CONFIG: dict[str, GameModeConfig] = {
    MODE_CHALLENGE: CHALLENGE_CONFIG,
    MODE_TIME_ATTACK: TIME_ATTACK_CONFIG,
    MODE_SURVIVAL: SURVIVAL_CONFIG,
}

SELECTABLE_MODES: tuple[str, ...] = (
    MODE_CHALLENGE,
    MODE_TIME_ATTACK,
    MODE_SURVIVAL,
    MODE_BLITZ,
)


def is_mode_implemented(mode_code: str) -> bool:
    return mode_code in GAME_MODES_CONFIG
