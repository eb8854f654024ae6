"""Repositories over the repertoire store."""

from .moves import MoveRepository, move_repository

__all__ = ["MoveRepository", "move_repository"]
