"""Pick the next line a learner should study."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional, Sequence

from .constants import ROOT_POSITION
from .due_state import most_due_move
from .errors import NoDueMovesFound
from .line_builder import build_line_backwards, continue_line_until_end
from .line_search import find_due_line_with_latest_deviation
from .models import Move, StudyLine
from .move_choice import MoveChooser, RandomMoveChooser
from .move_graph import MoveGraph

logger = logging.getLogger(__name__)


def plan_study_line(
    moves: Iterable[Move],
    *,
    now: datetime,
    last_line_ids: Optional[Sequence[int]] = None,
    chooser: Optional[MoveChooser] = None,
    root_position: str = ROOT_POSITION,
) -> StudyLine:
    """Select the line to study from one repertoire snapshot.

    Without a previous line, the most due move is extended into a full line
    and study starts at its first move. With a previous line, the line that
    deviates from it latest is returned together with the deviation index.
    """
    graph = MoveGraph(moves)
    if last_line_ids:
        logger.debug("Searching deviation from previous line of %d moves", len(last_line_ids))
        return find_due_line_with_latest_deviation(last_line_ids, graph, now)

    seed = most_due_move(graph)
    if seed is None:
        raise NoDueMovesFound("The repertoire has no own moves to study.")
    chooser = chooser or RandomMoveChooser()
    line = build_line_backwards([seed], graph, chooser, root_position)
    line = continue_line_until_end(line, graph, chooser)
    logger.info("Built fresh study line of %d moves around move #%s", len(line), seed.id)
    return StudyLine(moves=tuple(line), start_ix=0)


__all__ = ["plan_study_line"]
