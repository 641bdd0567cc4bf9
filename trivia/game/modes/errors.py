class GameModeError(Exception):
    pass


class UnknownModeError(GameModeError, ValueError):
    def __init__(self, mode: object) -> None:
        super().__init__(f"Unknown game mode: {mode}")
        self.mode = mode
