"""Policies for picking one move among several candidate continuations."""

from __future__ import annotations

import random
from datetime import datetime
from typing import Optional, Protocol, Sequence

from .due_state import is_due
from .models import Move


class MoveChooser(Protocol):
    """Anything that can pick one of N candidate moves."""

    def choose(self, candidates: Sequence[Move]) -> Move:  # pragma: no cover - protocol definition
        ...


class RandomMoveChooser:
    """Uniform choice among all candidates."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def choose(self, candidates: Sequence[Move]) -> Move:
        if not candidates:
            raise ValueError("Cannot choose from an empty candidate list.")
        return self._rng.choice(list(candidates))


class DueFirstMoveChooser:
    """Uniform choice among due candidates, or among all when none is due."""

    def __init__(self, now: datetime, rng: Optional[random.Random] = None) -> None:
        self._now = now
        self._rng = rng or random.Random()

    def choose(self, candidates: Sequence[Move]) -> Move:
        if not candidates:
            raise ValueError("Cannot choose from an empty candidate list.")
        due = [move for move in candidates if is_due(move, self._now)]
        return self._rng.choice(due or list(candidates))


def build_move_chooser(policy: str, now: datetime, rng: Optional[random.Random] = None) -> MoveChooser:
    if policy == "random":
        return RandomMoveChooser(rng)
    if policy == "prefer_due":
        return DueFirstMoveChooser(now, rng)
    raise ValueError(f"Unknown line extension policy: {policy!r}")


__all__ = [
    "DueFirstMoveChooser",
    "MoveChooser",
    "RandomMoveChooser",
    "build_move_chooser",
]
