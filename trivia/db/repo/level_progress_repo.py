from __future__ import annotations

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trivia.db.models.challenge_level_progress import ChallengeLevelProgress


class LevelProgressRepo:
    @staticmethod
    async def get_by_user_level(
        session: AsyncSession,
        *,
        user_id: int,
        level_id: int,
    ) -> ChallengeLevelProgress | None:
        return await session.get(
            ChallengeLevelProgress,
            {
                "user_id": user_id,
                "level_id": level_id,
            },
        )

    @staticmethod
    async def list_by_user(session: AsyncSession, *, user_id: int) -> list[ChallengeLevelProgress]:
        stmt = (
            select(ChallengeLevelProgress)
            .where(ChallengeLevelProgress.user_id == user_id)
            .order_by(ChallengeLevelProgress.level_id)
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def unlock_level(
        session: AsyncSession,
        *,
        user_id: int,
        level_id: int,
        now_utc: datetime,
    ) -> tuple[ChallengeLevelProgress, bool]:
        progress = await LevelProgressRepo.get_by_user_level(session, user_id=user_id, level_id=level_id)
        if progress is not None:
            return progress, False

        progress = ChallengeLevelProgress(
            user_id=user_id,
            level_id=level_id,
            badge_earned=False,
            unlocked_at=now_utc,
        )
        session.add(progress)
        await session.flush()
        return progress, True

    @staticmethod
    async def award_badge(
        session: AsyncSession,
        *,
        user_id: int,
        level_id: int,
        now_utc: datetime,
    ) -> bool:
        progress, _ = await LevelProgressRepo.unlock_level(
            session,
            user_id=user_id,
            level_id=level_id,
            now_utc=now_utc,
        )
        if progress.badge_earned:
            return False

        progress.badge_earned = True
        progress.badge_earned_at = now_utc
        await session.flush()
        return True
