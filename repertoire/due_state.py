"""Due-state evaluation for repertoire moves."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from .errors import InvalidDueState
from .models import Move


def is_due(move: Move, now: datetime) -> bool:
    """Return True when ``move`` should be reviewed at ``now``.

    Opponent moves are never due. A learning due time is compared against the
    exact instant; a review due date is due for the whole of that day.
    """
    if not move.own_move:
        return False
    if move.learning_due_time is not None:
        return move.learning_due_time <= now
    if move.review_due_date is not None:
        return move.review_due_date <= now.date()
    raise InvalidDueState(move.id)


def most_due_move(moves: Iterable[Move]) -> Optional[Move]:
    """Return the own move that became due first.

    Moves in learning count as more due than moves in review. This is a
    running fold, not a total order: the first own move seeds the result, so a
    review move can never displace a seed that has no review date.
    """
    best: Optional[Move] = None
    for move in moves:
        if not move.own_move:
            continue
        if best is None:
            best = move
        elif move.learning_due_time is not None and (
            best.learning_due_time is None or best.learning_due_time > move.learning_due_time
        ):
            best = move
        elif (
            move.review_due_date is not None
            and best.review_due_date is not None
            and best.review_due_date > move.review_due_date
        ):
            best = move
    return best


__all__ = ["is_due", "most_due_move"]
