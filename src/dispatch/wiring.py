"""Registry wiring for the default ingestion pipeline."""

from __future__ import annotations

from consumers.contracts import DatabaseLogger
from consumers.database_logger import DatabaseLoggerSimulator
from consumers.log_event_handler import LogEventCommandHandler
from consumers.partner_a import NotifyPartnerACommandHandler
from consumers.partner_b import ProcessPartnerBDataCommandHandler
from core.config import IbtConfig
from core.types import ProcessedEvent
from dispatch.commands import LogEventCommand, NotifyPartnerACommand, ProcessPartnerBDataCommand
from dispatch.mediator import Mediator
from dispatch.middleware import log_command_timing
from dispatch.orchestrator import ProcessingOrchestrator


def build_mediator(
    config: IbtConfig,
    database_logger: DatabaseLogger | None = None,
) -> Mediator:
    """Build a mediator with the orchestrator and all command handlers.

    Args:
        config: Runtime configuration providing the partner B output directory.
        database_logger: Optional sink override, simulated when omitted.

    Returns:
        Mediator ready to publish ``ProcessedEvent`` notifications.
    """
    mediator = Mediator(middlewares=(log_command_timing,))
    orchestrator = ProcessingOrchestrator(mediator)
    mediator.subscribe(ProcessedEvent, orchestrator.handle)
    log_handler = LogEventCommandHandler(database_logger or DatabaseLoggerSimulator())
    mediator.register_handler(LogEventCommand, log_handler.handle)
    mediator.register_handler(NotifyPartnerACommand, NotifyPartnerACommandHandler().handle)
    partner_b_handler = ProcessPartnerBDataCommandHandler(config.output_dir)
    mediator.register_handler(ProcessPartnerBDataCommand, partner_b_handler.handle)
    return mediator
