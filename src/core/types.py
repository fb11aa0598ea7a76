"""Shared typed models.

This module defines immutable data models used by the ingest, dispatch,
and consumer layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class ExtractedRecord:
    """Validated fields extracted from one term sheet.

    Attributes:
        event_type: Event type code of the first term sheet event.
        product_name_full: Full instrument product name.
        ibt_type_code: IBT instrument type code.
        isin: ISIN taken from the ``I-`` instrument identifier.
    """

    event_type: str
    product_name_full: str
    ibt_type_code: str
    isin: str


@dataclass(frozen=True)
class CorrelatedMessage:
    """Envelope base for every event and command in one ingestion cycle.

    Attributes:
        correlation_id: Identifier shared by all messages of one cycle.
    """

    correlation_id: UUID


@dataclass(frozen=True)
class ProcessedEvent(CorrelatedMessage):
    """Notification published once a term sheet was accepted.

    Attributes:
        event_type: Event type code from the record.
        product_name_full: Product name from the record.
        ibt_type_code: IBT type code from the record.
        isin: ISIN from the record.
        processing_timestamp: UTC time the record was accepted.
    """

    event_type: str
    product_name_full: str
    ibt_type_code: str
    isin: str
    processing_timestamp: datetime

    @classmethod
    def from_record(
        cls,
        record: ExtractedRecord,
        processing_timestamp: datetime,
        correlation_id: UUID,
    ) -> "ProcessedEvent":
        """Wrap an extracted record into a publishable event."""
        return cls(
            correlation_id=correlation_id,
            event_type=record.event_type,
            product_name_full=record.product_name_full,
            ibt_type_code=record.ibt_type_code,
            isin=record.isin,
            processing_timestamp=processing_timestamp,
        )
