from __future__ import annotations

import random
from pathlib import Path
from typing import Sequence

import structlog
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, model_validator

from trivia.core.config import get_settings
from trivia.game.questions.errors import QuestionBankEmptyError, QuestionBankFormatError
from trivia.game.questions.static_bank import STATIC_QUESTION_POOL
from trivia.game.questions.types import QuizQuestion

logger = structlog.get_logger("trivia.game.questions.bank")

MIXED_DIFFICULTY = "Mixed"


class QuestionRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int | str
    category: str | None = None
    question: str = Field(min_length=1)
    options: list[str] = Field(min_length=2)
    correct_answer: int = Field(alias="correctAnswer", ge=0)
    difficulty: str | None = None

    @model_validator(mode="after")
    def _correct_answer_in_range(self) -> QuestionRecord:
        if self.correct_answer >= len(self.options):
            raise ValueError("correctAnswer must point at one of the options")
        return self

    def to_question(self) -> QuizQuestion:
        return QuizQuestion(
            question_id=str(self.id),
            category=self.category,
            text=self.question,
            options=tuple(self.options),
            correct_option=self.correct_answer,
            difficulty=self.difficulty,
        )


_RECORDS_ADAPTER = TypeAdapter(list[QuestionRecord])


def parse_question_bank(raw: str | bytes) -> tuple[QuizQuestion, ...]:
    try:
        records = _RECORDS_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise QuestionBankFormatError(str(exc)) from exc
    return tuple(record.to_question() for record in records)


def load_question_bank(path: str | Path) -> tuple[QuizQuestion, ...]:
    bank_path = Path(path)
    try:
        raw = bank_path.read_bytes()
    except OSError as exc:
        raise QuestionBankFormatError(f"cannot read question bank {bank_path}: {exc}") from exc

    questions = parse_question_bank(raw)
    logger.info("question_bank_loaded", path=str(bank_path), total=len(questions))
    return questions


def resolve_question_bank(path: str | Path | None) -> tuple[QuizQuestion, ...]:
    if path is None:
        return STATIC_QUESTION_POOL
    return load_question_bank(path)


def shuffle_options(question: QuizQuestion, rng: random.Random) -> QuizQuestion:
    order = list(range(len(question.options)))
    rng.shuffle(order)
    return QuizQuestion(
        question_id=question.question_id,
        category=question.category,
        text=question.text,
        options=tuple(question.options[index] for index in order),
        correct_option=order.index(question.correct_option),
        difficulty=question.difficulty,
    )


def filter_by_difficulty(
    bank: Sequence[QuizQuestion],
    difficulty: str | None,
) -> list[QuizQuestion]:
    if difficulty is None or difficulty == MIXED_DIFFICULTY:
        return list(bank)

    filtered = [question for question in bank if question.difficulty == difficulty]
    if not filtered:
        logger.info("question_bank_difficulty_fallback", difficulty=difficulty, total=len(bank))
        return list(bank)
    return filtered


def select_questions(
    bank: Sequence[QuizQuestion],
    *,
    difficulty: str | None = None,
    limit: int | None = None,
    rng: random.Random | None = None,
) -> list[QuizQuestion]:
    if not bank:
        raise QuestionBankEmptyError("question bank is empty")

    rng = rng or random.Random()
    pool = filter_by_difficulty(bank, difficulty)
    rng.shuffle(pool)
    if limit is not None:
        pool = pool[: max(0, limit)]
    return [shuffle_options(question, rng) for question in pool]


def load_session_questions(
    limit: int | None = None,
    *,
    rng: random.Random | None = None,
) -> list[QuizQuestion]:
    settings = get_settings()
    bank = resolve_question_bank(settings.questions_path)
    return select_questions(bank, difficulty=settings.quiz_difficulty, limit=limit, rng=rng)
