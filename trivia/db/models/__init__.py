from trivia.db.models.base import Base
from trivia.db.models.challenge_level_progress import ChallengeLevelProgress
from trivia.db.models.player_mode_stats import PlayerModeStats
from trivia.db.models.player_wallets import PlayerWallet

__all__ = [
    "Base",
    "ChallengeLevelProgress",
    "PlayerModeStats",
    "PlayerWallet",
]
