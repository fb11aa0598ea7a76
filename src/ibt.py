"""Public SDK surface for IBT term sheet ingestion.

This module provides a stable import path for library users.
It re-exports the parser, pipeline wiring, and typed models.
"""

from __future__ import annotations

from core.config import IbtConfig
from core.errors import (
    IbtConfigError,
    IbtConsumerError,
    IbtDispatchError,
    IbtError,
    IbtParseError,
)
from core.types import CorrelatedMessage, ExtractedRecord, ProcessedEvent
from dispatch.commands import (
    LogEventCommand,
    NotifyPartnerACommand,
    ProcessPartnerBDataCommand,
    derive_commands,
)
from dispatch.mediator import Mediator
from dispatch.orchestrator import DispatchSummary, ProcessingOrchestrator
from dispatch.wiring import build_mediator
from ingest.term_sheet_parser import TermSheetParser
from ingest.worker import run_ingestion_cycle

__all__ = [
    "CorrelatedMessage",
    "DispatchSummary",
    "ExtractedRecord",
    "IbtConfig",
    "IbtConfigError",
    "IbtConsumerError",
    "IbtDispatchError",
    "IbtError",
    "IbtParseError",
    "LogEventCommand",
    "Mediator",
    "NotifyPartnerACommand",
    "ProcessPartnerBDataCommand",
    "ProcessedEvent",
    "ProcessingOrchestrator",
    "TermSheetParser",
    "build_mediator",
    "derive_commands",
    "run_ingestion_cycle",
]
