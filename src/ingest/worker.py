"""One-shot ingestion cycle.

This module runs a single parse-and-publish cycle for the configured
term sheet. The caller owns scheduling; nothing here loops or retries.
"""

from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Callable
from uuid import UUID, uuid4

import structlog

from core.config import IbtConfig
from core.logging_config import get_logger
from core.types import ProcessedEvent
from dispatch.mediator import Mediator
from ingest.term_sheet_parser import TermSheetParser

_LOGGER = get_logger(__name__)


def run_ingestion_cycle(
    config: IbtConfig,
    parser: TermSheetParser,
    mediator: Mediator,
    cancel_event: threading.Event | None = None,
    clock: Callable[[], datetime] | None = None,
    id_factory: Callable[[], UUID] = uuid4,
) -> ProcessedEvent | None:
    """Parse the configured term sheet and publish it once.

    Args:
        config: Runtime configuration with the input file path.
        parser: Term sheet field extractor.
        mediator: Mediator receiving the processed event.
        cancel_event: Optional signal checked right before publishing.
        clock: Optional UTC clock override.
        id_factory: Correlation id factory.

    Returns:
        Published event, or ``None`` when extraction failed or the cycle
        was cancelled.
    """
    input_path = str(config.input_file_path)
    _LOGGER.info("ingestion_cycle_started", input_file_path=input_path)
    record = parser.parse_file(config.input_file_path)
    if record is None:
        _LOGGER.info("ingestion_cycle_finished", input_file_path=input_path, published=False)
        return None
    if cancel_event is not None and cancel_event.is_set():
        _LOGGER.warning("ingestion_cycle_cancelled", input_file_path=input_path)
        return None
    event = ProcessedEvent.from_record(
        record,
        processing_timestamp=(clock or _utc_now)(),
        correlation_id=id_factory(),
    )
    correlation_id = str(event.correlation_id)
    with structlog.contextvars.bound_contextvars(correlation_id=correlation_id):
        _LOGGER.info("processed_event_publishing", event_type=event.event_type)
        mediator.publish(event)
        _LOGGER.info("processed_event_published")
    _LOGGER.info("ingestion_cycle_finished", input_file_path=input_path, published=True)
    return event


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)
