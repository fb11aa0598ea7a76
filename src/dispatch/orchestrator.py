"""Fan-out orchestration for processed term sheet events.

This module derives the per-consumer commands from one event and sends
them in a fixed order. A failing command is logged and does not stop
the remaining commands; nothing is retried.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from core.logging_config import get_logger
from core.types import ProcessedEvent
from dispatch.commands import derive_commands
from dispatch.mediator import Mediator

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class DispatchSummary:
    """Outcome of dispatching the commands of one event.

    Attributes:
        correlation_id: Correlation id shared by all dispatched commands.
        dispatched: Command names in dispatch order.
        failed: Names of commands whose handler raised.
    """

    correlation_id: UUID
    dispatched: tuple[str, ...]
    failed: tuple[str, ...]

    @property
    def succeeded(self) -> bool:
        """Return whether every command completed."""
        return not self.failed


class ProcessingOrchestrator:
    """Subscriber that turns a processed event into consumer commands."""

    def __init__(self, mediator: Mediator) -> None:
        self._mediator = mediator

    def handle(self, event: ProcessedEvent) -> None:
        """Event subscriber entry point."""
        self.dispatch(event)

    def dispatch(self, event: ProcessedEvent) -> DispatchSummary:
        """Send the log, partner A, and partner B commands sequentially.

        Args:
            event: Accepted term sheet event.

        Returns:
            Summary of dispatched and failed commands.
        """
        correlation_id = str(event.correlation_id)
        _LOGGER.info("orchestration_started", correlation_id=correlation_id)
        dispatched: list[str] = []
        failed: list[str] = []
        for command in derive_commands(event):
            command_name = type(command).__name__
            dispatched.append(command_name)
            try:
                self._mediator.send(command)
            except Exception as error:
                failed.append(command_name)
                _LOGGER.error(
                    "command_dispatch_failed",
                    command=command_name,
                    correlation_id=correlation_id,
                    error=str(error),
                )
        _LOGGER.info(
            "orchestration_completed",
            correlation_id=correlation_id,
            dispatched=dispatched,
            failed=failed,
        )
        return DispatchSummary(
            correlation_id=event.correlation_id,
            dispatched=tuple(dispatched),
            failed=tuple(failed),
        )
