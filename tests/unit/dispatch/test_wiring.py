"""Unit tests for default pipeline wiring."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from pathlib import Path
from uuid import UUID

import pytest

from core.config import IbtConfig
from core.errors import IbtDispatchError
from core.types import ProcessedEvent
from dispatch.commands import LogEventCommand
from dispatch.wiring import build_mediator


class _RecordingSink:
    def __init__(self) -> None:
        self.rows: list[tuple[str, datetime]] = []

    def log_event(self, event_type: str, timestamp: datetime) -> None:
        self.rows.append((event_type, timestamp))


def test_build_mediator_routes_log_command_to_sink(
    tmp_path: Path,
    correlation_id: UUID,
    processing_timestamp: datetime,
) -> None:
    """The log command should reach the injected database sink."""
    sink = _RecordingSink()
    mediator = build_mediator(replace(IbtConfig.defaults(), output_dir=tmp_path), sink)

    mediator.send(
        LogEventCommand(
            correlation_id=correlation_id,
            event_type="9097",
            timestamp=processing_timestamp,
        )
    )

    assert sink.rows == [("9097", processing_timestamp)]


def test_build_mediator_subscribes_orchestrator(
    tmp_path: Path,
    correlation_id: UUID,
    processing_timestamp: datetime,
) -> None:
    """Publishing a processed event should fan out to every handler."""
    sink = _RecordingSink()
    mediator = build_mediator(replace(IbtConfig.defaults(), output_dir=tmp_path), sink)
    event = ProcessedEvent(
        correlation_id=correlation_id,
        event_type="9097",
        product_name_full="Acme Bond",
        ibt_type_code="T1",
        isin="CH0000000000",
        processing_timestamp=processing_timestamp,
    )

    mediator.publish(event)

    assert len(sink.rows) == 1 and (tmp_path / "InstrumentNotification.xml").exists()


def test_build_mediator_registers_handlers_once(tmp_path: Path) -> None:
    """Handlers should not be registered twice for one command type."""
    mediator = build_mediator(replace(IbtConfig.defaults(), output_dir=tmp_path))

    with pytest.raises(IbtDispatchError):
        mediator.register_handler(LogEventCommand, lambda command: None)

    assert True


def test_build_mediator_fans_out_to_additional_subscribers(
    tmp_path: Path,
    correlation_id: UUID,
    processing_timestamp: datetime,
) -> None:
    """Extra subscribers should receive the event next to the orchestrator."""
    sink = _RecordingSink()
    mediator = build_mediator(replace(IbtConfig.defaults(), output_dir=tmp_path), sink)
    observed: list[UUID] = []
    mediator.subscribe(ProcessedEvent, lambda event: observed.append(event.correlation_id))
    event = ProcessedEvent(
        correlation_id=correlation_id,
        event_type="4711",
        product_name_full="Acme Bond",
        ibt_type_code="T1",
        isin="CH0000000000",
        processing_timestamp=processing_timestamp,
    )

    mediator.publish(event)

    assert observed == [correlation_id]
    assert sink.rows == [("4711", processing_timestamp)]
    assert not (tmp_path / "InstrumentNotification.xml").exists()
