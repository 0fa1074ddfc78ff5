"""create_scores

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2026-10-17
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "1a2b3c4d5e6f"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "scores",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("player_name", sa.String(length=50), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.CheckConstraint("score >= 0", name="ck_scores_score_non_negative"),
        sa.CheckConstraint("length(player_name) > 0", name="ck_scores_player_name_not_empty"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index(
        "ix_scores_score_id",
        "scores",
        [sa.text("score DESC"), "id"],
        unique=False,
    )
    op.create_index(
        "ix_scores_player_name_score_id",
        "scores",
        ["player_name", sa.text("score DESC"), "id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_scores_player_name_score_id", table_name="scores")
    op.drop_index("ix_scores_score_id", table_name="scores")
    op.drop_table("scores")
