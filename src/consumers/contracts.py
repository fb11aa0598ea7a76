"""Contracts the dispatch core expects from downstream consumers."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class DatabaseLogger(Protocol):
    """Persistence sink for processed event types."""

    def log_event(self, event_type: str, timestamp: datetime) -> None:
        """Persist one event type with its processing time."""
        ...
