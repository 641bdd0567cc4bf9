from __future__ import annotations

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trivia.db.models.player_mode_stats import PlayerModeStats


class ModeStatsRepo:
    @staticmethod
    async def get_by_user_mode(
        session: AsyncSession,
        *,
        user_id: int,
        mode_code: str,
    ) -> PlayerModeStats | None:
        return await session.get(
            PlayerModeStats,
            {
                "user_id": user_id,
                "mode_code": mode_code,
            },
        )

    @staticmethod
    async def get_by_user_mode_for_update(
        session: AsyncSession,
        *,
        user_id: int,
        mode_code: str,
    ) -> PlayerModeStats | None:
        stmt = (
            select(PlayerModeStats)
            .where(
                PlayerModeStats.user_id == user_id,
                PlayerModeStats.mode_code == mode_code,
            )
            .with_for_update()
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def get_or_create_for_update(
        session: AsyncSession,
        *,
        user_id: int,
        mode_code: str,
        now_utc: datetime,
    ) -> PlayerModeStats:
        stats = await ModeStatsRepo.get_by_user_mode_for_update(
            session,
            user_id=user_id,
            mode_code=mode_code,
        )
        if stats is not None:
            return stats

        stats = PlayerModeStats(
            user_id=user_id,
            mode_code=mode_code,
            games_played=0,
            best_score=0,
            best_points=0,
            total_questions=0,
            correct_answers=0,
            best_streak=0,
            games_with_revive=0,
            updated_at=now_utc,
        )
        session.add(stats)
        await session.flush()
        return stats

    @staticmethod
    async def list_top_by_mode(
        session: AsyncSession,
        *,
        mode_code: str,
        limit: int = 10,
    ) -> list[PlayerModeStats]:
        stmt = (
            select(PlayerModeStats)
            .where(PlayerModeStats.mode_code == mode_code)
            .order_by(PlayerModeStats.best_score.desc(), PlayerModeStats.best_points.desc(), PlayerModeStats.user_id)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())
