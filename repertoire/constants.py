"""Shared constants for the opening line trainer."""

from typing import Literal

# Standard starting position: placement, side to move and castling rights.
# The en-passant field is never part of a stored position key.
ROOT_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq"

ColorSelector = Literal["w", "b"]

WHITE = "w"
BLACK = "b"
