from __future__ import annotations

from datetime import date, datetime, timezone

from repertoire.telemetry import TelemetryEvent, emit_event, register_listener, unregister_listener


def test_listeners_receive_plain_payloads() -> None:
    received: list[TelemetryEvent] = []
    register_listener(received.append)
    try:
        emit_event(
            "study_line_selected",
            owner_id=3,
            at=datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc),
            due_on=date(2026, 10, 20),
        )
    finally:
        unregister_listener(received.append)

    assert len(received) == 1
    event = received[0]
    assert event.name == "study_line_selected"
    assert event.payload == {
        "owner_id": 3,
        "at": "2026-10-19T09:00:00+00:00",
        "due_on": "2026-10-20",
    }


def test_failing_listener_does_not_block_others() -> None:
    received: list[str] = []

    def broken(event: TelemetryEvent) -> None:
        raise RuntimeError("listener down")

    def working(event: TelemetryEvent) -> None:
        received.append(event.name)

    register_listener(broken)
    register_listener(working)
    try:
        emit_event("study_line_failed", owner_id=1)
    finally:
        unregister_listener(broken)
        unregister_listener(working)

    assert received == ["study_line_failed"]


def test_unregistered_listener_is_not_called() -> None:
    received: list[TelemetryEvent] = []
    register_listener(received.append)
    unregister_listener(received.append)
    emit_event("db_pool_status", connects=1)
    assert received == []
