from trivia.db.repo.level_progress_repo import LevelProgressRepo
from trivia.db.repo.mode_stats_repo import ModeStatsRepo
from trivia.db.repo.wallet_repo import WalletRepo

__all__ = [
    "LevelProgressRepo",
    "ModeStatsRepo",
    "WalletRepo",
]
