from __future__ import annotations

from datetime import datetime, timezone

import pytest

from trivia.economy.progress.errors import (
    ChallengeLevelLockedError,
    InsufficientGoldError,
    UnknownChallengeLevelError,
)
from trivia.economy.progress.service import ProgressService
from trivia.game.modes.types import ModeKind
from tests.economy.progress_fixtures import run_result

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
USER_ID = 42


@pytest.mark.asyncio
async def test_time_attack_result_updates_stats_and_gold(db_session) -> None:
    first = await ProgressService.record_game_result(
        db_session,
        user_id=USER_ID,
        result=run_result(ModeKind.TIME_ATTACK, score=9, answered=14, points=1350, best_streak=5),
        now_utc=NOW,
    )
    second = await ProgressService.record_game_result(
        db_session,
        user_id=USER_ID,
        result=run_result(ModeKind.TIME_ATTACK, score=6, answered=8, points=1600, revived=True),
        now_utc=NOW,
    )

    assert first.gold_awarded == 29
    assert second.gold_awarded == 26
    assert second.gold_balance == 55
    assert await ProgressService.get_gold_balance(db_session, user_id=USER_ID) == 55

    stats = await ProgressService.get_mode_stats(db_session, user_id=USER_ID, mode_code="timeAttack")
    assert stats.games_played == 2
    assert stats.best_score == 9
    assert stats.best_points == 1600
    assert stats.total_questions == 22
    assert stats.correct_answers == 15
    assert stats.best_streak == 5
    assert stats.games_with_revive == 1


@pytest.mark.asyncio
async def test_stats_are_kept_per_mode(db_session) -> None:
    await ProgressService.record_game_result(
        db_session,
        user_id=USER_ID,
        result=run_result(ModeKind.SURVIVAL, score=4, answered=7),
        now_utc=NOW,
    )

    survival = await ProgressService.get_mode_stats(db_session, user_id=USER_ID, mode_code="survival")
    challenge = await ProgressService.get_mode_stats(db_session, user_id=USER_ID, mode_code="challenge")

    assert survival.games_played == 1
    assert challenge.games_played == 0
    assert await ProgressService.get_gold_balance(db_session, user_id=USER_ID) == 0


@pytest.mark.asyncio
async def test_perfect_challenge_level_unlocks_next_level_once(db_session) -> None:
    assert await ProgressService.list_unlocked_levels(db_session, user_id=USER_ID) == [1]

    result = run_result(ModeKind.CHALLENGE, score=20, total_questions=20, completed=True)
    first = await ProgressService.record_game_result(
        db_session,
        user_id=USER_ID,
        result=result,
        level_id=1,
        now_utc=NOW,
    )
    replay = await ProgressService.record_game_result(
        db_session,
        user_id=USER_ID,
        result=result,
        level_id=1,
        now_utc=NOW,
    )

    assert first.gold_awarded == 50
    assert first.unlocked_level_id == 2
    assert first.badge_awarded is True
    assert replay.gold_awarded == 50
    assert replay.unlocked_level_id is None
    assert replay.badge_awarded is False
    assert replay.gold_balance == 100
    assert await ProgressService.list_unlocked_levels(db_session, user_id=USER_ID) == [1, 2]
    assert await ProgressService.list_badges(db_session, user_id=USER_ID) == [1]


@pytest.mark.asyncio
async def test_game_over_in_challenge_level_awards_nothing(db_session) -> None:
    reward = await ProgressService.record_game_result(
        db_session,
        user_id=USER_ID,
        result=run_result(ModeKind.CHALLENGE, score=5, answered=8, game_over_reason="No more lives"),
        level_id=1,
        now_utc=NOW,
    )

    assert reward.gold_awarded == 0
    assert reward.unlocked_level_id is None
    assert reward.badge_awarded is False
    assert reward.stats.games_played == 1


@pytest.mark.asyncio
async def test_unknown_level_is_rejected(db_session) -> None:
    with pytest.raises(UnknownChallengeLevelError):
        await ProgressService.record_game_result(
            db_session,
            user_id=USER_ID,
            result=run_result(ModeKind.CHALLENGE, score=1),
            level_id=9,
            now_utc=NOW,
        )


@pytest.mark.asyncio
async def test_locked_level_is_not_playable(db_session) -> None:
    await ProgressService.ensure_level_playable(db_session, user_id=USER_ID, level_id=1)

    with pytest.raises(ChallengeLevelLockedError):
        await ProgressService.ensure_level_playable(db_session, user_id=USER_ID, level_id=3)


@pytest.mark.asyncio
async def test_pay_for_revive_debits_gold(db_session) -> None:
    for _ in range(10):
        await ProgressService.record_game_result(
            db_session,
            user_id=USER_ID,
            result=run_result(ModeKind.TIME_ATTACK, score=10),
            now_utc=NOW,
        )

    payment = await ProgressService.pay_for_revive(db_session, user_id=USER_ID, now_utc=NOW)

    assert payment.gold_spent == 300
    assert payment.gold_balance == 0


@pytest.mark.asyncio
async def test_pay_for_revive_without_enough_gold_raises(db_session) -> None:
    await ProgressService.record_game_result(
        db_session,
        user_id=USER_ID,
        result=run_result(ModeKind.TIME_ATTACK, score=10),
        now_utc=NOW,
    )

    with pytest.raises(InsufficientGoldError):
        await ProgressService.pay_for_revive(db_session, user_id=USER_ID, now_utc=NOW)

    assert await ProgressService.get_gold_balance(db_session, user_id=USER_ID) == 30


@pytest.mark.asyncio
async def test_leaderboard_ranks_players_by_best_score_then_points(db_session) -> None:
    for user_id, score, points in ((1, 12, 1500), (2, 15, 1400), (3, 12, 1700), (4, 3, 300)):
        await ProgressService.record_game_result(
            db_session,
            user_id=user_id,
            result=run_result(ModeKind.TIME_ATTACK, score=score, points=points),
            now_utc=NOW,
        )
    await ProgressService.record_game_result(
        db_session,
        user_id=5,
        result=run_result(ModeKind.SURVIVAL, score=40),
        now_utc=NOW,
    )

    leaders = await ProgressService.list_leaderboard(db_session, mode_code="timeAttack", limit=3)

    assert [(entry.rank, entry.user_id) for entry in leaders] == [(1, 2), (2, 3), (3, 1)]
    assert leaders[0].best_score == 15
    assert leaders[1].best_points == 1700
    assert leaders[2].games_played == 1


@pytest.mark.asyncio
async def test_leaderboard_for_unplayed_mode_is_empty(db_session) -> None:
    assert await ProgressService.list_leaderboard(db_session, mode_code="challenge") == []
