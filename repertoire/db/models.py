"""ORM models backing the repertoire store."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from sqlalchemy import Boolean, Date, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class MoveModel(TimestampMixin, Base):
    __tablename__ = "moves"
    __table_args__ = (
        Index("ix_moves_owner_color", "owner_id", "for_white"),
        Index("ix_moves_from_position", "from_position"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner_id: Mapped[int] = mapped_column(Integer, nullable=False)
    for_white: Mapped[bool] = mapped_column(Boolean, nullable=False)
    from_position: Mapped[str] = mapped_column(String(100), nullable=False)
    to_position: Mapped[str] = mapped_column(String(100), nullable=False)
    notation: Mapped[str] = mapped_column(String(16), nullable=False)
    own_move: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    learning_due_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    review_due_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)


__all__ = ["MoveModel"]
