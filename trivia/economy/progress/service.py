from __future__ import annotations

from datetime import datetime

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from trivia.db.models.player_mode_stats import PlayerModeStats
from trivia.db.repo.level_progress_repo import LevelProgressRepo
from trivia.db.repo.mode_stats_repo import ModeStatsRepo
from trivia.db.repo.wallet_repo import WalletRepo
from trivia.economy.progress.errors import ChallengeLevelLockedError, InsufficientGoldError
from trivia.economy.progress.rules import (
    FIRST_LEVEL_ID,
    REVIVE_GOLD_COST,
    evaluate_challenge_level,
    get_challenge_level,
    gold_for_result,
    merge_stats,
)
from trivia.economy.progress.types import (
    GameRewardResult,
    LeaderboardEntry,
    ModeStatsSnapshot,
    RevivePaymentResult,
)
from trivia.game.modes.types import ModeKind
from trivia.game.sessions.types import RunResult

logger = structlog.get_logger("trivia.economy.progress")


class ProgressService:
    @staticmethod
    def _snapshot_from_model(stats: PlayerModeStats) -> ModeStatsSnapshot:
        return ModeStatsSnapshot(
            games_played=stats.games_played,
            best_score=stats.best_score,
            best_points=stats.best_points,
            total_questions=stats.total_questions,
            correct_answers=stats.correct_answers,
            best_streak=stats.best_streak,
            games_with_revive=stats.games_with_revive,
        )

    @staticmethod
    def _apply_snapshot_to_model(stats: PlayerModeStats, snapshot: ModeStatsSnapshot, now_utc: datetime) -> None:
        stats.games_played = snapshot.games_played
        stats.best_score = snapshot.best_score
        stats.best_points = snapshot.best_points
        stats.total_questions = snapshot.total_questions
        stats.correct_answers = snapshot.correct_answers
        stats.best_streak = snapshot.best_streak
        stats.games_with_revive = snapshot.games_with_revive
        stats.updated_at = now_utc

    @staticmethod
    async def get_mode_stats(
        session: AsyncSession,
        *,
        user_id: int,
        mode_code: str,
    ) -> ModeStatsSnapshot:
        stats = await ModeStatsRepo.get_by_user_mode(session, user_id=user_id, mode_code=mode_code)
        if stats is None:
            return ModeStatsSnapshot()
        return ProgressService._snapshot_from_model(stats)

    @staticmethod
    async def get_gold_balance(session: AsyncSession, *, user_id: int) -> int:
        wallet = await WalletRepo.get_by_user_id(session, user_id)
        return wallet.gold if wallet is not None else 0

    @staticmethod
    async def list_leaderboard(
        session: AsyncSession,
        *,
        mode_code: str,
        limit: int = 10,
    ) -> list[LeaderboardEntry]:
        rows = await ModeStatsRepo.list_top_by_mode(session, mode_code=mode_code, limit=limit)
        return [
            LeaderboardEntry(
                rank=position,
                user_id=row.user_id,
                best_score=row.best_score,
                best_points=row.best_points,
                games_played=row.games_played,
            )
            for position, row in enumerate(rows, start=1)
        ]

    @staticmethod
    async def list_unlocked_levels(session: AsyncSession, *, user_id: int) -> list[int]:
        rows = await LevelProgressRepo.list_by_user(session, user_id=user_id)
        return sorted({FIRST_LEVEL_ID, *(row.level_id for row in rows)})

    @staticmethod
    async def list_badges(session: AsyncSession, *, user_id: int) -> list[int]:
        rows = await LevelProgressRepo.list_by_user(session, user_id=user_id)
        return [row.level_id for row in rows if row.badge_earned]

    @staticmethod
    async def ensure_level_playable(session: AsyncSession, *, user_id: int, level_id: int) -> None:
        get_challenge_level(level_id)
        unlocked = await ProgressService.list_unlocked_levels(session, user_id=user_id)
        if level_id not in unlocked:
            raise ChallengeLevelLockedError(f"challenge level {level_id} is locked")

    @staticmethod
    async def record_game_result(
        session: AsyncSession,
        *,
        user_id: int,
        result: RunResult,
        now_utc: datetime,
        level_id: int | None = None,
    ) -> GameRewardResult:
        level = get_challenge_level(level_id) if level_id is not None else None

        stats = await ModeStatsRepo.get_or_create_for_update(
            session,
            user_id=user_id,
            mode_code=result.mode.value,
            now_utc=now_utc,
        )
        snapshot = merge_stats(ProgressService._snapshot_from_model(stats), result)
        ProgressService._apply_snapshot_to_model(stats, snapshot, now_utc)

        gold_awarded = gold_for_result(result, level=level)
        wallet = await WalletRepo.credit_gold(session, user_id=user_id, amount=gold_awarded, now_utc=now_utc)

        unlocked_level_id: int | None = None
        badge_awarded = False
        if result.mode is ModeKind.CHALLENGE and level is not None:
            outcome = evaluate_challenge_level(
                level,
                score=result.score,
                total_questions=result.total_questions,
                completed=result.completed,
            )
            if outcome.unlock_level_id is not None:
                _, unlocked_now = await LevelProgressRepo.unlock_level(
                    session,
                    user_id=user_id,
                    level_id=outcome.unlock_level_id,
                    now_utc=now_utc,
                )
                if unlocked_now:
                    unlocked_level_id = outcome.unlock_level_id
                    logger.info(
                        "challenge_level_unlocked",
                        user_id=user_id,
                        completed_level_id=level.level_id,
                        unlocked_level_id=unlocked_level_id,
                    )
            if outcome.badge_level_id is not None:
                badge_awarded = await LevelProgressRepo.award_badge(
                    session,
                    user_id=user_id,
                    level_id=outcome.badge_level_id,
                    now_utc=now_utc,
                )

        await session.flush()
        logger.info(
            "game_result_recorded",
            user_id=user_id,
            mode=result.mode.value,
            score=result.score,
            points=result.points,
            completed=result.completed,
            gold_awarded=gold_awarded,
            level_id=level_id,
        )
        return GameRewardResult(
            gold_awarded=gold_awarded,
            gold_balance=wallet.gold,
            stats=snapshot,
            unlocked_level_id=unlocked_level_id,
            badge_awarded=badge_awarded,
        )

    @staticmethod
    async def pay_for_revive(
        session: AsyncSession,
        *,
        user_id: int,
        now_utc: datetime,
    ) -> RevivePaymentResult:
        wallet = await WalletRepo.debit_gold(
            session,
            user_id=user_id,
            amount=REVIVE_GOLD_COST,
            now_utc=now_utc,
        )
        if wallet is None:
            raise InsufficientGoldError(f"revive costs {REVIVE_GOLD_COST} gold")

        logger.info("revive_paid", user_id=user_id, gold_spent=REVIVE_GOLD_COST, gold_balance=wallet.gold)
        return RevivePaymentResult(gold_spent=REVIVE_GOLD_COST, gold_balance=wallet.gold)
