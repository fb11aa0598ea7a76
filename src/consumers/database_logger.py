"""Simulated database sink for processed events."""

from __future__ import annotations

from datetime import datetime

from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


class DatabaseLoggerSimulator:
    """Database logger that records events as structured log lines."""

    def log_event(self, event_type: str, timestamp: datetime) -> None:
        """Write one simulated database row."""
        _LOGGER.info(
            "database_log_simulation",
            event_type=event_type,
            timestamp=timestamp.isoformat(),
        )
