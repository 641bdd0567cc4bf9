from __future__ import annotations

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trivia.db.models.player_wallets import PlayerWallet


class WalletRepo:
    @staticmethod
    async def get_by_user_id(session: AsyncSession, user_id: int) -> PlayerWallet | None:
        return await session.get(PlayerWallet, user_id)

    @staticmethod
    async def get_by_user_id_for_update(session: AsyncSession, user_id: int) -> PlayerWallet | None:
        stmt = select(PlayerWallet).where(PlayerWallet.user_id == user_id).with_for_update()
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def get_or_create_for_update(
        session: AsyncSession,
        *,
        user_id: int,
        now_utc: datetime,
    ) -> PlayerWallet:
        wallet = await WalletRepo.get_by_user_id_for_update(session, user_id)
        if wallet is not None:
            return wallet

        wallet = PlayerWallet(user_id=user_id, gold=0, updated_at=now_utc)
        session.add(wallet)
        await session.flush()
        return wallet

    @staticmethod
    async def credit_gold(
        session: AsyncSession,
        *,
        user_id: int,
        amount: int,
        now_utc: datetime,
    ) -> PlayerWallet:
        wallet = await WalletRepo.get_or_create_for_update(session, user_id=user_id, now_utc=now_utc)
        if amount <= 0:
            return wallet

        wallet.gold += amount
        wallet.updated_at = now_utc
        await session.flush()
        return wallet

    @staticmethod
    async def debit_gold(
        session: AsyncSession,
        *,
        user_id: int,
        amount: int,
        now_utc: datetime,
    ) -> PlayerWallet | None:
        """Returns ``None`` and leaves the balance untouched when funds are short."""
        wallet = await WalletRepo.get_or_create_for_update(session, user_id=user_id, now_utc=now_utc)
        if wallet.gold < amount:
            return None

        wallet.gold -= amount
        wallet.updated_at = now_utc
        await session.flush()
        return wallet
