from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, Boolean, CheckConstraint, DateTime, SmallInteger
from sqlalchemy.orm import Mapped, mapped_column

from trivia.db.models.base import Base


class ChallengeLevelProgress(Base):
    __tablename__ = "challenge_level_progress"
    __table_args__ = (CheckConstraint("level_id > 0", name="level_id_positive"),)

    user_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    level_id: Mapped[int] = mapped_column(SmallInteger, primary_key=True)
    badge_earned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    unlocked_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    badge_earned_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
