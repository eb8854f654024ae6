"""Failures raised while selecting a study line."""

from __future__ import annotations


class LineSelectionError(Exception):
    """Base class for every line selection failure."""


class InvalidDueState(LineSelectionError):
    """An own move was evaluated for dueness without any due time scheduled."""

    def __init__(self, move_id: int) -> None:
        super().__init__(f"Move #{move_id} is an own move without a learning or review due time.")
        self.move_id = move_id


class NoPrecedingMove(LineSelectionError):
    """The repertoire root cannot be reached backwards from a move."""

    def __init__(self, move_id: int, notation: str) -> None:
        super().__init__(f"No preceding moves found for move #{move_id} ({notation}).")
        self.move_id = move_id
        self.notation = notation


class NoDueMovesFound(LineSelectionError):
    def __init__(self, message: str = "No due moves found.") -> None:
        super().__init__(message)


class CycleDetected(LineSelectionError):
    """Following ``move_id`` would revisit a position already on the line."""

    def __init__(self, move_id: int) -> None:
        super().__init__(f"Move #{move_id} leads back to a position already on the line.")
        self.move_id = move_id


class UnknownMoveError(LineSelectionError, LookupError):
    def __init__(self, move_id: int) -> None:
        super().__init__(f"Move #{move_id} is not part of this repertoire.")
        self.move_id = move_id


class InvalidPreviousLine(LineSelectionError, ValueError):
    """Two consecutive moves of a supplied line do not connect."""

    def __init__(self, move_id: int, next_move_id: int) -> None:
        super().__init__(f"Move #{next_move_id} does not continue from move #{move_id}.")
        self.move_id = move_id
        self.next_move_id = next_move_id


__all__ = [
    "CycleDetected",
    "InvalidDueState",
    "InvalidPreviousLine",
    "LineSelectionError",
    "NoDueMovesFound",
    "NoPrecedingMove",
    "UnknownMoveError",
]
