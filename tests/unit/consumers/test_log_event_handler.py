"""Unit tests for the database log handler."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

import pytest

from consumers.database_logger import DatabaseLoggerSimulator
from consumers.log_event_handler import LogEventCommandHandler
from core.errors import IbtConsumerError
from dispatch.commands import LogEventCommand
from tests.log_recorder import RecordingLogger


class _RecordingSink:
    def __init__(self) -> None:
        self.rows: list[tuple[str, datetime]] = []

    def log_event(self, event_type: str, timestamp: datetime) -> None:
        self.rows.append((event_type, timestamp))


class _FailingSink:
    def log_event(self, event_type: str, timestamp: datetime) -> None:
        raise ConnectionError("database unavailable")


def test_handle_persists_event_type(correlation_id: UUID, processing_timestamp: datetime) -> None:
    """Handler should forward event type and timestamp to the sink."""
    sink = _RecordingSink()
    command = LogEventCommand(
        correlation_id=correlation_id,
        event_type="9097",
        timestamp=processing_timestamp,
    )

    LogEventCommandHandler(sink).handle(command)

    assert sink.rows == [("9097", processing_timestamp)]


def test_handle_propagates_sink_failure(
    correlation_id: UUID,
    processing_timestamp: datetime,
) -> None:
    """Sink failures should surface as consumer errors."""
    command = LogEventCommand(
        correlation_id=correlation_id,
        event_type="9097",
        timestamp=processing_timestamp,
    )

    with pytest.raises(IbtConsumerError) as error_info:
        LogEventCommandHandler(_FailingSink()).handle(command)

    assert isinstance(error_info.value.__cause__, ConnectionError)


def test_database_logger_simulator_logs_iso_timestamp(
    processing_timestamp: datetime,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Simulated sink should log the event with a round-trip timestamp."""
    logger = RecordingLogger()
    monkeypatch.setattr("consumers.database_logger._LOGGER", logger)

    DatabaseLoggerSimulator().log_event("9097", processing_timestamp)

    assert logger.records == [
        (
            "info",
            "database_log_simulation",
            {"event_type": "9097", "timestamp": processing_timestamp.isoformat()},
        )
    ]
