"""Database-backed repository of repertoire moves."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db.models import MoveModel
from ..models import Move


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite drops tzinfo on the way back; stored values are always UTC.
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class MoveRepository:
    """Loads and stores moves partitioned by owner and repertoire color."""

    def list_for_repertoire(self, session: Session, owner_id: int, for_white: bool) -> List[Move]:
        stmt = (
            select(MoveModel)
            .where(MoveModel.owner_id == owner_id, MoveModel.for_white == for_white)
            .order_by(MoveModel.id.asc())
        )
        return [self._to_domain(model) for model in session.execute(stmt).scalars()]

    def add(
        self,
        session: Session,
        *,
        owner_id: int,
        for_white: bool,
        from_position: str,
        to_position: str,
        notation: str,
        own_move: bool = False,
        learning_due_time: Optional[datetime] = None,
        review_due_date: Optional[date] = None,
    ) -> Move:
        if learning_due_time is not None and review_due_date is not None:
            raise ValueError("A move is either in learning or in review, not both.")
        model = MoveModel(
            owner_id=owner_id,
            for_white=for_white,
            from_position=from_position,
            to_position=to_position,
            notation=notation,
            own_move=own_move,
            learning_due_time=_as_utc(learning_due_time),
            review_due_date=review_due_date,
        )
        session.add(model)
        session.flush()
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: MoveModel) -> Move:
        return Move(
            id=model.id,
            from_position=model.from_position,
            to_position=model.to_position,
            notation=model.notation,
            own_move=model.own_move,
            learning_due_time=_as_utc(model.learning_due_time),
            review_due_date=model.review_due_date,
        )


move_repository = MoveRepository()

__all__ = ["MoveRepository", "move_repository"]
