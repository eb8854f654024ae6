"""Extend a seed move into a full line from the repertoire root to a leaf."""

from __future__ import annotations

import logging
from typing import List, Sequence

from .constants import ROOT_POSITION
from .errors import CycleDetected, NoPrecedingMove
from .models import Move
from .move_choice import MoveChooser
from .move_graph import MoveGraph

logger = logging.getLogger(__name__)


def _positions(line: Sequence[Move]) -> set[str]:
    positions = {move.to_position for move in line}
    positions.update(move.from_position for move in line)
    return positions


def build_line_backwards(
    seed_line: Sequence[Move],
    graph: MoveGraph,
    chooser: MoveChooser,
    root_position: str = ROOT_POSITION,
) -> List[Move]:
    """Prepend moves until the line starts at ``root_position``.

    Raises ``NoPrecedingMove`` when no move arrives at the current first
    position, and ``CycleDetected`` when every arriving move starts from a
    position the line already visits.
    """
    if not seed_line:
        raise ValueError("Cannot build a line backwards from an empty seed.")
    line = list(seed_line)
    visited = _positions(line)
    while line[0].from_position != root_position:
        first = line[0]
        candidates = graph.incoming(first.from_position)
        if not candidates:
            raise NoPrecedingMove(first.id, first.notation)
        fresh = [move for move in candidates if move.from_position not in visited]
        if not fresh:
            raise CycleDetected(candidates[0].id)
        preceding = chooser.choose(fresh)
        visited.add(preceding.from_position)
        line.insert(0, preceding)
    logger.debug("Built line backwards to root with %d moves", len(line))
    return line


def continue_line_until_end(
    line: Sequence[Move],
    graph: MoveGraph,
    chooser: MoveChooser,
) -> List[Move]:
    """Append moves until the last position has no continuation."""
    if not line:
        raise ValueError("Cannot continue an empty line.")
    extended = list(line)
    visited = _positions(extended)
    while True:
        candidates = graph.outgoing(extended[-1].to_position)
        if not candidates:
            return extended
        fresh = [move for move in candidates if move.to_position not in visited]
        if not fresh:
            raise CycleDetected(candidates[0].id)
        succeeding = chooser.choose(fresh)
        visited.add(succeeding.to_position)
        extended.append(succeeding)


__all__ = ["build_line_backwards", "continue_line_until_end"]
