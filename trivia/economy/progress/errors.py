class ProgressError(Exception):
    pass


class InsufficientGoldError(ProgressError):
    pass


class UnknownChallengeLevelError(ProgressError):
    pass


class ChallengeLevelLockedError(ProgressError):
    pass
