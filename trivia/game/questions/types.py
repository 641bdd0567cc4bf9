from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class QuizQuestion:
    question_id: str
    text: str
    options: tuple[str, ...]
    correct_option: int
    category: str | None = None
    difficulty: str | None = None

    @property
    def correct_answer_text(self) -> str:
        return self.options[self.correct_option]
