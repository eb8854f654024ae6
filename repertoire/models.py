"""Domain models and response payloads for study line selection."""

from __future__ import annotations

from datetime import date, datetime
from typing import List, NamedTuple, Optional, Tuple

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field


class Move(BaseModel):
    """A repertoire edge from one board position to the next."""

    model_config = ConfigDict(frozen=True)

    id: int
    from_position: str
    to_position: str
    notation: str = ""
    own_move: bool = False
    learning_due_time: Optional[AwareDatetime] = None
    review_due_date: Optional[date] = None


class Continuation(NamedTuple):
    due_count: int
    moves: Tuple[Move, ...]


class StudyLine(NamedTuple):
    moves: Tuple[Move, ...]
    start_ix: int


class MovePayload(BaseModel):
    id: int
    from_position: str
    to_position: str
    notation: str
    own_move: bool
    learning_due_time: Optional[datetime] = None
    review_due_date: Optional[date] = None


class StudyLinePayload(BaseModel):
    line: List[MovePayload] = Field(default_factory=list)
    start_ix: int = Field(default=0, ge=0)


def study_line_payload(study_line: StudyLine) -> StudyLinePayload:
    return StudyLinePayload(
        line=[MovePayload(**move.model_dump()) for move in study_line.moves],
        start_ix=study_line.start_ix,
    )


__all__ = [
    "Continuation",
    "Move",
    "MovePayload",
    "StudyLine",
    "StudyLinePayload",
    "study_line_payload",
]
