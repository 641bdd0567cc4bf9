from trivia.economy.progress.service import ProgressService

__all__ = ["ProgressService"]
