from trivia.economy.progress import ProgressService

__all__ = ["ProgressService"]
