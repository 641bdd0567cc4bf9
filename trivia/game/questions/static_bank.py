from __future__ import annotations

from trivia.game.questions.types import QuizQuestion

STATIC_QUESTION_POOL: tuple[QuizQuestion, ...] = (
    QuizQuestion(
        question_id="static_001",
        category="Geography",
        text="What is the capital of Australia?",
        options=("Sydney", "Melbourne", "Canberra", "Perth"),
        correct_option=2,
        difficulty="Easy",
    ),
    QuizQuestion(
        question_id="static_002",
        category="Science",
        text="Which planet is known as the Red Planet?",
        options=("Venus", "Mars", "Jupiter", "Mercury"),
        correct_option=1,
        difficulty="Easy",
    ),
    QuizQuestion(
        question_id="static_003",
        category="History",
        text="In which year did the Berlin Wall fall?",
        options=("1987", "1989", "1991", "1993"),
        correct_option=1,
        difficulty="Medium",
    ),
    QuizQuestion(
        question_id="static_004",
        category="Science",
        text="What is the chemical symbol for gold?",
        options=("Ag", "Go", "Gd", "Au"),
        correct_option=3,
        difficulty="Easy",
    ),
    QuizQuestion(
        question_id="static_005",
        category="Literature",
        text="Who wrote 'One Hundred Years of Solitude'?",
        options=("Gabriel García Márquez", "Mario Vargas Llosa", "Julio Cortázar", "Isabel Allende"),
        correct_option=0,
        difficulty="Medium",
    ),
    QuizQuestion(
        question_id="static_006",
        category="Mathematics",
        text="What is the smallest prime number greater than 50?",
        options=("51", "53", "55", "57"),
        correct_option=1,
        difficulty="Medium",
    ),
    QuizQuestion(
        question_id="static_007",
        category="Geography",
        text="Which river flows through Budapest?",
        options=("Danube", "Rhine", "Vistula", "Elbe"),
        correct_option=0,
        difficulty="Hard",
    ),
    QuizQuestion(
        question_id="static_008",
        category="Science",
        text="What is the most abundant gas in Earth's atmosphere?",
        options=("Oxygen", "Carbon dioxide", "Argon", "Nitrogen"),
        correct_option=3,
        difficulty="Hard",
    ),
)
