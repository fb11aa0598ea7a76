"""Handler persisting processed event types."""

from __future__ import annotations

from consumers.contracts import DatabaseLogger
from core.errors import IbtConsumerError
from core.logging_config import get_logger
from dispatch.commands import LogEventCommand

_LOGGER = get_logger(__name__)


class LogEventCommandHandler:
    """Forward log commands to the database sink."""

    def __init__(self, database_logger: DatabaseLogger) -> None:
        self._database_logger = database_logger

    def handle(self, command: LogEventCommand) -> None:
        """Persist the command event type.

        Raises:
            IbtConsumerError: If the sink fails.
        """
        _LOGGER.debug(
            "log_event_persisting",
            event_type=command.event_type,
            correlation_id=str(command.correlation_id),
        )
        try:
            self._database_logger.log_event(command.event_type, command.timestamp)
        except Exception as error:
            raise IbtConsumerError(
                f"Database logger failed for event type '{command.event_type}': {error}."
            ) from error
