"""Commands derived from a processed term sheet event.

Each command is a pure projection of ``ProcessedEvent`` and is consumed
exactly once by its handler.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from core.types import CorrelatedMessage, ProcessedEvent


@dataclass(frozen=True)
class LogEventCommand(CorrelatedMessage):
    """Persist the event type and processing time."""

    event_type: str
    timestamp: datetime


@dataclass(frozen=True)
class NotifyPartnerACommand(CorrelatedMessage):
    """Notify partner A about the processed instrument."""

    product_name_full: str
    ibt_type_code: str
    event_type: str
    isin: str


@dataclass(frozen=True)
class ProcessPartnerBDataCommand(CorrelatedMessage):
    """Emit the partner B instrument notification document."""

    event_type: str
    isin: str
    processing_timestamp: datetime


def derive_commands(
    event: ProcessedEvent,
) -> tuple[LogEventCommand, NotifyPartnerACommand, ProcessPartnerBDataCommand]:
    """Project one event into its commands in dispatch order.

    Args:
        event: Accepted term sheet event.

    Returns:
        Log, partner A, and partner B commands sharing the event correlation id.
    """
    return (
        LogEventCommand(
            correlation_id=event.correlation_id,
            event_type=event.event_type,
            timestamp=event.processing_timestamp,
        ),
        NotifyPartnerACommand(
            correlation_id=event.correlation_id,
            product_name_full=event.product_name_full,
            ibt_type_code=event.ibt_type_code,
            event_type=event.event_type,
            isin=event.isin,
        ),
        ProcessPartnerBDataCommand(
            correlation_id=event.correlation_id,
            event_type=event.event_type,
            isin=event.isin,
            processing_timestamp=event.processing_timestamp,
        ),
    )
