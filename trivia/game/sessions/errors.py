class QuizRunError(Exception):
    pass


class InvalidAnswerOptionError(QuizRunError):
    pass


class ReviveNotAvailableError(QuizRunError):
    pass
