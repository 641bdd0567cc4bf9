from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, CheckConstraint, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from trivia.db.models.base import Base


class PlayerModeStats(Base):
    __tablename__ = "player_mode_stats"
    __table_args__ = (
        CheckConstraint(
            "mode_code IN ('challenge','timeAttack','survival')",
            name="mode_code",
        ),
        CheckConstraint("games_played >= 0", name="games_played_non_negative"),
        CheckConstraint("best_score >= 0", name="best_score_non_negative"),
        Index("idx_player_mode_stats_mode_best", "mode_code", "best_score"),
    )

    user_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    mode_code: Mapped[str] = mapped_column(String(32), primary_key=True)
    games_played: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    best_score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    best_points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_questions: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    correct_answers: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    best_streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    games_with_revive: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
