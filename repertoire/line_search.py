"""Search for continuations that carry the most due moves.

Every outgoing edge of every reachable position is explored, so the cost grows
exponentially with the branching of the repertoire. Real opening repertoires
are narrow enough for this; pathological graphs are not guarded against.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import AbstractSet, Optional, Sequence, Tuple

from .errors import CycleDetected, InvalidPreviousLine, NoDueMovesFound
from .due_state import is_due
from .models import Continuation, Move, StudyLine
from .move_graph import MoveGraph

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    move: Move
    due: int
    candidates: Tuple[Move, ...]
    next_ix: int = 0
    best: Optional[Continuation] = None

    def result(self) -> Continuation:
        if self.best is None:
            return Continuation(self.due, (self.move,))
        return Continuation(self.best.due_count + self.due, (self.move, *self.best.moves))


def find_continuation_with_most_due_moves(
    start_move: Move,
    graph: MoveGraph,
    excluded_ids: AbstractSet[int],
    now: datetime,
) -> Continuation:
    """Return the path from ``start_move`` to a leaf with the most due moves.

    Among children with equal counts the first enumerated one wins. Moves whose
    id is in ``excluded_ids`` are never followed.
    """
    on_path = {start_move.from_position, start_move.to_position}
    stack = [
        _Frame(
            move=start_move,
            due=int(is_due(start_move, now)),
            candidates=graph.outgoing(start_move.to_position, excluded_ids),
        )
    ]
    while True:
        frame = stack[-1]
        if frame.next_ix < len(frame.candidates):
            child = frame.candidates[frame.next_ix]
            frame.next_ix += 1
            if child.to_position in on_path:
                raise CycleDetected(child.id)
            on_path.add(child.to_position)
            stack.append(
                _Frame(
                    move=child,
                    due=int(is_due(child, now)),
                    candidates=graph.outgoing(child.to_position, excluded_ids),
                )
            )
            continue

        stack.pop()
        result = frame.result()
        if not stack:
            return result
        on_path.discard(frame.move.to_position)
        parent = stack[-1]
        if parent.best is None or result.due_count > parent.best.due_count:
            parent.best = result


def find_due_line_with_latest_deviation(
    last_line_ids: Sequence[int],
    graph: MoveGraph,
    now: datetime,
) -> StudyLine:
    """Deviate from the previously studied line as late as possible.

    Positions are tried from the second-to-last move backwards. At each one the
    move that was played next last time is excluded, together with every move
    excluded at later positions. The first position with any alternative
    continuation wins.
    """
    previous = [graph.require(move_id) for move_id in last_line_ids]
    for move, next_move in zip(previous, previous[1:]):
        if move.to_position != next_move.from_position:
            raise InvalidPreviousLine(move.id, next_move.id)
    excluded: frozenset[int] = frozenset()
    for move_ix in range(len(previous) - 2, -1, -1):
        excluded = excluded | {previous[move_ix + 1].id}
        continuation = find_continuation_with_most_due_moves(previous[move_ix], graph, excluded, now)
        if len(continuation.moves) > 1:
            logger.debug(
                "Deviating at index %d with %d due moves ahead",
                move_ix,
                continuation.due_count,
            )
            return StudyLine(moves=tuple(previous[:move_ix]) + continuation.moves, start_ix=move_ix)
    raise NoDueMovesFound("No alternative continuation found along the previous line.")


__all__ = ["find_continuation_with_most_due_moves", "find_due_line_with_latest_deviation"]
