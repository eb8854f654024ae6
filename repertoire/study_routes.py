"""Study line endpoints consumed by the training client."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from time import perf_counter
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import StrictInt, TypeAdapter, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .config import Settings, get_settings
from .constants import WHITE, ColorSelector
from .db.session import get_session_dependency
from .errors import InvalidPreviousLine, LineSelectionError, NoDueMovesFound, UnknownMoveError
from .models import StudyLinePayload, study_line_payload
from .move_choice import MoveChooser, build_move_chooser
from .repositories.moves import move_repository
from .study_planner import plan_study_line
from .telemetry import emit_event

router = APIRouter(prefix="/api/study", tags=["study"])
logger = logging.getLogger(__name__)

_MOVE_IDS = TypeAdapter(List[StrictInt])


def get_evaluation_instant() -> datetime:
    """The single notion of "now" used for every due comparison of a request."""
    return datetime.now(timezone.utc)


def get_move_chooser(
    now: datetime = Depends(get_evaluation_instant),
    settings: Settings = Depends(get_settings),
) -> MoveChooser:
    return build_move_chooser(settings.line_extension_policy, now)


def _parse_last_line(raw: Optional[str]) -> List[int]:
    if raw is None or not raw.strip():
        return []
    try:
        return _MOVE_IDS.validate_python(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="'last' must be a JSON array of move ids.",
        ) from exc


def _failure(owner_id: int, color: str, exc: Exception, status_code: int) -> HTTPException:
    emit_event(
        "study_line_failed",
        owner_id=owner_id,
        color=color,
        error=str(exc),
        exception_type=exc.__class__.__name__,
        status_code=status_code,
    )
    return HTTPException(status_code=status_code, detail=str(exc))


@router.get("/{owner_id}", response_model=StudyLinePayload, status_code=status.HTTP_200_OK)
def get_study_line(
    owner_id: int,
    color: ColorSelector = Query(..., description="Repertoire color: 'w' for white, 'b' for black."),
    last: Optional[str] = Query(
        default=None,
        description="JSON array with the move ids of the line studied last.",
    ),
    session: Session = Depends(get_session_dependency),
    now: datetime = Depends(get_evaluation_instant),
    chooser: MoveChooser = Depends(get_move_chooser),
    settings: Settings = Depends(get_settings),
) -> StudyLinePayload:
    started_at = perf_counter()
    last_line_ids = _parse_last_line(last)

    try:
        moves = move_repository.list_for_repertoire(session, owner_id, for_white=color == WHITE)
    except SQLAlchemyError as exc:
        logger.exception("Failed to load repertoire for owner=%s color=%s", owner_id, color)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="The repertoire store is unavailable. Try again shortly.",
        ) from exc

    try:
        study_line = plan_study_line(
            moves,
            now=now,
            last_line_ids=last_line_ids,
            chooser=chooser,
            root_position=settings.root_position,
        )
    except (UnknownMoveError, InvalidPreviousLine) as exc:
        raise _failure(owner_id, color, exc, status.HTTP_400_BAD_REQUEST) from exc
    except NoDueMovesFound as exc:
        raise _failure(owner_id, color, exc, status.HTTP_404_NOT_FOUND) from exc
    except LineSelectionError as exc:
        logger.exception("Repertoire data for owner=%s color=%s is inconsistent", owner_id, color)
        raise _failure(owner_id, color, exc, status.HTTP_500_INTERNAL_SERVER_ERROR) from exc

    emit_event(
        "study_line_selected",
        owner_id=owner_id,
        color=color,
        mode="deviation" if last_line_ids else "fresh",
        repertoire_size=len(moves),
        line_length=len(study_line.moves),
        start_ix=study_line.start_ix,
        duration_ms=round((perf_counter() - started_at) * 1000, 2),
    )
    return study_line_payload(study_line)


__all__ = ["get_evaluation_instant", "get_move_chooser", "router"]
