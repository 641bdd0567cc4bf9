from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, CheckConstraint, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from trivia.db.models.base import Base


class PlayerWallet(Base):
    __tablename__ = "player_wallets"
    __table_args__ = (CheckConstraint("gold >= 0", name="gold_non_negative"),)

    user_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    gold: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
