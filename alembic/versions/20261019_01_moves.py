"""Repertoire moves table."""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "20261019_01_moves"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "moves",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.Column("for_white", sa.Boolean(), nullable=False),
        sa.Column("from_position", sa.String(length=100), nullable=False),
        sa.Column("to_position", sa.String(length=100), nullable=False),
        sa.Column("notation", sa.String(length=16), nullable=False),
        sa.Column("own_move", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("learning_due_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("review_due_date", sa.Date(), nullable=True),
    )
    op.create_index("ix_moves_owner_color", "moves", ["owner_id", "for_white"])
    op.create_index("ix_moves_from_position", "moves", ["from_position"])


def downgrade() -> None:
    op.drop_index("ix_moves_from_position", table_name="moves")
    op.drop_index("ix_moves_owner_color", table_name="moves")
    op.drop_table("moves")
