class QuestionBankError(Exception):
    pass


class QuestionBankEmptyError(QuestionBankError):
    pass


class QuestionBankFormatError(QuestionBankError):
    pass
