from __future__ import annotations

import argparse
from collections import Counter

from trivia.core.config import get_settings
from trivia.core.logging import configure_logging_from_settings
from trivia.game.questions.bank import load_question_bank
from trivia.game.questions.errors import QuestionBankError


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate a JSON question bank.")
    parser.add_argument("path", nargs="?", default=None, help="Bank path (defaults to QUESTIONS_PATH).")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging_from_settings()
    path = args.path or get_settings().questions_path
    if not path:
        print("quizbank_check failed: no path given and QUESTIONS_PATH is not set")  # noqa: T201
        return 1

    try:
        questions = load_question_bank(path)
    except QuestionBankError as exc:
        print(f"quizbank_check failed: {exc}")  # noqa: T201
        return 1

    print(f"quizbank_check total={len(questions)}")  # noqa: T201
    if not questions:
        print("quizbank_check failed: bank is empty")  # noqa: T201
        return 1

    by_difficulty = Counter(question.difficulty or "unspecified" for question in questions)
    for difficulty, count in sorted(by_difficulty.items()):
        print(f"quizbank_check difficulty={difficulty} count={count}")  # noqa: T201
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
