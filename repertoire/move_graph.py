"""Read-only adjacency view over one repertoire snapshot."""

from __future__ import annotations

from collections import defaultdict
from typing import AbstractSet, Dict, Iterable, Iterator, List, Optional, Tuple

from .errors import UnknownMoveError
from .models import Move

_NO_EXCLUSIONS: frozenset[int] = frozenset()


class MoveGraph:
    """Moves of a single (owner, color) repertoire keyed by board position.

    Moves keep the order they were supplied in; that order decides ties in
    every traversal built on top of the graph.
    """

    def __init__(self, moves: Iterable[Move]) -> None:
        self._moves: Tuple[Move, ...] = tuple(moves)
        self._by_id: Dict[int, Move] = {}
        outgoing: Dict[str, List[Move]] = defaultdict(list)
        incoming: Dict[str, List[Move]] = defaultdict(list)
        for move in self._moves:
            self._by_id[move.id] = move
            outgoing[move.from_position].append(move)
            incoming[move.to_position].append(move)
        self._outgoing = {position: tuple(group) for position, group in outgoing.items()}
        self._incoming = {position: tuple(group) for position, group in incoming.items()}

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __contains__(self, move_id: object) -> bool:
        return move_id in self._by_id

    def get(self, move_id: int) -> Optional[Move]:
        return self._by_id.get(move_id)

    def require(self, move_id: int) -> Move:
        move = self._by_id.get(move_id)
        if move is None:
            raise UnknownMoveError(move_id)
        return move

    def outgoing(self, position: str, excluded: AbstractSet[int] = _NO_EXCLUSIONS) -> Tuple[Move, ...]:
        moves = self._outgoing.get(position, ())
        if not excluded:
            return moves
        return tuple(move for move in moves if move.id not in excluded)

    def incoming(self, position: str) -> Tuple[Move, ...]:
        return self._incoming.get(position, ())

    def own_moves(self) -> Tuple[Move, ...]:
        return tuple(move for move in self._moves if move.own_move)


__all__ = ["MoveGraph"]
