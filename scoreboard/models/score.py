"""Score model.

A Score is one accepted submission: who played, what they scored, when.
Rows are append-only; the store assigns `id` and `created_at`.
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column

from scoreboard.stores.postgres import Base

PLAYER_NAME_MAX_LENGTH = 50


class Score(Base):
    """Persisted score submission."""

    __tablename__ = "scores"
    __table_args__ = (
        CheckConstraint("score >= 0", name="ck_scores_score_non_negative"),
        CheckConstraint("length(player_name) > 0", name="ck_scores_player_name_not_empty"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Exact, case-sensitive name as submitted
    player_name: Mapped[str] = mapped_column(String(PLAYER_NAME_MAX_LENGTH), nullable=False)
    score: Mapped[int] = mapped_column(nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Score {self.id} {self.player_name}={self.score}>"


# Leaderboard scan: score DESC, id ASC
Index("ix_scores_score_id", Score.score.desc(), Score.id)
# Player best lookup
Index("ix_scores_player_name_score_id", Score.player_name, Score.score.desc(), Score.id)
