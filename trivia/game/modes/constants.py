from __future__ import annotations

MODE_CHALLENGE = "challenge"
MODE_TIME_ATTACK = "timeAttack"
MODE_SURVIVAL = "survival"
# Listed on the selection screen, no session implementation yet.
MODE_BLITZ = "blitz"

CHALLENGE_INITIAL_LIVES = 3
CHALLENGE_TIME_PER_QUESTION_SEC = 15
CHALLENGE_REVIVE_LIVES = 1

TIME_ATTACK_TOTAL_TIME_SEC = 60
TIME_ATTACK_STREAK_LENGTH = 3
TIME_ATTACK_STREAK_BONUS_SEC = 3
TIME_ATTACK_WRONG_PENALTY_SEC = 3

SURVIVAL_TIME_PER_QUESTION_SEC = 10
SURVIVAL_MAX_CONSECUTIVE_WRONG = 3

GAME_OVER_REASON_NO_LIVES = "No more lives"
GAME_OVER_REASON_TIME_UP = "Time is up!"
GAME_OVER_REASON_STRIKES = "3 wrong answers in a row"
