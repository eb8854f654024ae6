"""Due-continuation search and latest-deviation selection."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from repertoire.constants import ROOT_POSITION
from repertoire.errors import (
    CycleDetected,
    InvalidDueState,
    InvalidPreviousLine,
    NoDueMovesFound,
    UnknownMoveError,
)
from repertoire.line_search import (
    find_continuation_with_most_due_moves,
    find_due_line_with_latest_deviation,
)
from repertoire.models import Move
from repertoire.move_graph import MoveGraph

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
PAST = NOW - timedelta(hours=2)
FUTURE = NOW + timedelta(days=2)


def _own(move_id: int, src: str, dst: str, due: bool) -> Move:
    return Move(
        id=move_id,
        from_position=src,
        to_position=dst,
        notation=f"m{move_id}",
        own_move=True,
        learning_due_time=PAST if due else FUTURE,
    )


def _reply(move_id: int, src: str, dst: str) -> Move:
    return Move(id=move_id, from_position=src, to_position=dst, notation=f"m{move_id}")


def _ids(moves) -> list[int]:
    return [move.id for move in moves]


def test_straight_line_counts_every_due_move() -> None:
    moves = [
        _own(1, ROOT_POSITION, "a", due=True),
        _reply(2, "a", "b"),
        _own(3, "b", "c", due=False),
        _reply(4, "c", "d"),
        _own(5, "d", "e", due=True),
    ]
    graph = MoveGraph(moves)
    result = find_continuation_with_most_due_moves(moves[0], graph, frozenset(), NOW)
    assert result.due_count == 2
    assert _ids(result.moves) == [1, 2, 3, 4, 5]


def test_leaf_start_returns_only_itself() -> None:
    leaf = _own(1, "a", "b", due=True)
    result = find_continuation_with_most_due_moves(leaf, MoveGraph([leaf]), frozenset(), NOW)
    assert result.due_count == 1
    assert result.moves == (leaf,)


def test_branch_with_strictly_more_due_moves_wins() -> None:
    moves = [
        _reply(1, "a", "b"),
        _own(2, "b", "c", due=False),
        _own(3, "b", "d", due=True),
        _reply(4, "d", "e"),
        _own(5, "e", "f", due=True),
        _reply(6, "c", "g"),
        _own(7, "g", "h", due=True),
    ]
    graph = MoveGraph(moves)
    result = find_continuation_with_most_due_moves(moves[0], graph, frozenset(), NOW)
    assert result.due_count == 2
    assert _ids(result.moves) == [1, 3, 4, 5]


def test_ties_keep_the_first_enumerated_branch() -> None:
    first = [_reply(1, "a", "b"), _own(2, "b", "c", due=True), _own(3, "b", "d", due=True)]
    result = find_continuation_with_most_due_moves(first[0], MoveGraph(first), frozenset(), NOW)
    assert _ids(result.moves) == [1, 2]

    swapped = [first[0], first[2], first[1]]
    result = find_continuation_with_most_due_moves(swapped[0], MoveGraph(swapped), frozenset(), NOW)
    assert _ids(result.moves) == [1, 3]


def test_longer_branch_without_due_moves_does_not_beat_earlier_tie() -> None:
    moves = [
        _reply(1, "a", "b"),
        _own(2, "b", "c", due=False),
        _own(3, "b", "d", due=False),
        _reply(4, "d", "e"),
        _own(5, "e", "f", due=False),
    ]
    result = find_continuation_with_most_due_moves(moves[0], MoveGraph(moves), frozenset(), NOW)
    assert result.due_count == 0
    assert _ids(result.moves) == [1, 2]


def test_excluded_moves_are_never_followed() -> None:
    moves = [_reply(1, "a", "b"), _own(2, "b", "c", due=True), _own(3, "b", "d", due=False)]
    graph = MoveGraph(moves)
    result = find_continuation_with_most_due_moves(moves[0], graph, frozenset({2}), NOW)
    assert _ids(result.moves) == [1, 3]
    assert result.due_count == 0

    result = find_continuation_with_most_due_moves(moves[0], graph, frozenset({2, 3}), NOW)
    assert _ids(result.moves) == [1]


def test_search_on_cyclic_graph_fails_fast() -> None:
    moves = [_reply(1, "a", "b"), _reply(2, "b", "c"), _reply(3, "c", "a")]
    with pytest.raises(CycleDetected) as excinfo:
        find_continuation_with_most_due_moves(moves[0], MoveGraph(moves), frozenset(), NOW)
    assert excinfo.value.move_id == 3


def test_transpositions_are_not_cycles() -> None:
    moves = [
        _reply(1, "a", "b"),
        _own(2, "b", "c", due=True),
        _own(3, "b", "d", due=False),
        _reply(4, "c", "e"),
        _reply(5, "d", "e"),
        _own(6, "e", "f", due=True),
    ]
    result = find_continuation_with_most_due_moves(moves[0], MoveGraph(moves), frozenset(), NOW)
    assert result.due_count == 2
    assert _ids(result.moves) == [1, 2, 4, 6]


def test_unscheduled_own_move_propagates_invalid_state() -> None:
    broken = Move(id=2, from_position="b", to_position="c", own_move=True)
    moves = [_reply(1, "a", "b"), broken]
    with pytest.raises(InvalidDueState):
        find_continuation_with_most_due_moves(moves[0], MoveGraph(moves), frozenset(), NOW)


def _repertoire() -> list[Move]:
    # root -1-> a -2-> b -3-> c is the line studied last; 4 branches off at a.
    return [
        _own(1, ROOT_POSITION, "a", due=False),
        _reply(2, "a", "b"),
        _own(3, "b", "c", due=False),
        _reply(4, "a", "d"),
        _own(5, "d", "e", due=True),
    ]


def test_deviation_at_first_move() -> None:
    graph = MoveGraph(_repertoire())
    line = find_due_line_with_latest_deviation([1, 2, 3], graph, NOW)
    assert line.start_ix == 0
    assert _ids(line.moves) == [1, 4, 5]
    assert not set(_ids(line.moves[1:])) & {2, 3}


def test_latest_deviation_is_preferred() -> None:
    moves = _repertoire() + [_own(6, "b", "f", due=False)]
    line = find_due_line_with_latest_deviation([1, 2, 3], MoveGraph(moves), NOW)
    assert line.start_ix == 1
    assert _ids(line.moves) == [1, 2, 6]


def test_exclusions_carry_over_to_earlier_positions() -> None:
    moves = [
        _own(1, ROOT_POSITION, "a", due=False),
        _reply(2, "a", "b"),
        _own(3, "b", "c", due=True),
        _reply(4, "a", "b"),
    ]
    line = find_due_line_with_latest_deviation([1, 2, 3], MoveGraph(moves), NOW)
    assert line.start_ix == 0
    assert _ids(line.moves) == [1, 4]


def test_prefix_before_deviation_is_kept() -> None:
    moves = [
        _own(1, ROOT_POSITION, "a", due=False),
        _reply(2, "a", "b"),
        _own(3, "b", "c", due=False),
        _reply(4, "c", "d"),
        _reply(5, "c", "e"),
        _own(6, "e", "f", due=True),
    ]
    line = find_due_line_with_latest_deviation([1, 2, 3, 4], MoveGraph(moves), NOW)
    assert line.start_ix == 2
    assert _ids(line.moves) == [1, 2, 3, 5, 6]


def test_line_without_alternatives_has_no_due_moves() -> None:
    moves = [_own(1, ROOT_POSITION, "a", due=True), _reply(2, "a", "b"), _own(3, "b", "c", due=True)]
    with pytest.raises(NoDueMovesFound):
        find_due_line_with_latest_deviation([1, 2, 3], MoveGraph(moves), NOW)


def test_single_move_previous_line_has_nothing_to_deviate_from() -> None:
    with pytest.raises(NoDueMovesFound):
        find_due_line_with_latest_deviation([1], MoveGraph(_repertoire()), NOW)


def test_unknown_move_id_in_previous_line() -> None:
    with pytest.raises(UnknownMoveError) as excinfo:
        find_due_line_with_latest_deviation([1, 2, 99], MoveGraph(_repertoire()), NOW)
    assert excinfo.value.move_id == 99


def test_disconnected_previous_line_is_rejected() -> None:
    with pytest.raises(InvalidPreviousLine) as excinfo:
        find_due_line_with_latest_deviation([2, 1, 3], MoveGraph(_repertoire()), NOW)
    assert excinfo.value.move_id == 2
    assert excinfo.value.next_move_id == 1
    assert isinstance(excinfo.value, ValueError)
