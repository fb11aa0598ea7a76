"""Explicit publish/send mediator.

This module keeps an explicit registry from message type to ordered
handler list. Events fan out to every subscriber with failures isolated;
commands go to exactly one handler through the middleware chain and
failures propagate to the caller.
"""

from __future__ import annotations

from typing import Callable, Sequence

from core.errors import IbtDispatchError
from core.logging_config import get_logger
from dispatch.middleware import CommandHandler, Middleware, compose_middleware, correlation_id_of

_LOGGER = get_logger(__name__)

EventSubscriber = Callable[[object], None]


class Mediator:
    """In-process mediator with explicit subscriber and handler registries."""

    def __init__(self, middlewares: Sequence[Middleware] = ()) -> None:
        self._subscribers: dict[type, list[EventSubscriber]] = {}
        self._handlers: dict[type, CommandHandler] = {}
        self._send_pipeline = compose_middleware(self._invoke_handler, middlewares)

    def subscribe(self, event_type: type, subscriber: EventSubscriber) -> None:
        """Append a subscriber for one event type.

        Subscribers are notified in registration order.
        """
        self._subscribers.setdefault(event_type, []).append(subscriber)

    def register_handler(self, command_type: type, handler: CommandHandler) -> None:
        """Register the single handler for one command type.

        Raises:
            IbtDispatchError: If the command type already has a handler.
        """
        if command_type in self._handlers:
            raise IbtDispatchError(
                f"Command {command_type.__name__} already has a registered handler. "
                "Register exactly one handler per command type."
            )
        self._handlers[command_type] = handler

    def publish(self, event: object) -> None:
        """Notify every subscriber of the event type.

        A failing subscriber is logged and does not stop delivery to the
        remaining subscribers.
        """
        subscribers = list(self._subscribers.get(type(event), ()))
        if not subscribers:
            _LOGGER.warning(
                "event_without_subscribers",
                event_name=type(event).__name__,
                correlation_id=str(correlation_id_of(event)),
            )
            return
        for subscriber in subscribers:
            try:
                subscriber(event)
            except Exception as error:
                _LOGGER.error(
                    "event_subscriber_failed",
                    event_name=type(event).__name__,
                    subscriber=_callable_name(subscriber),
                    correlation_id=str(correlation_id_of(event)),
                    error=str(error),
                )

    def send(self, command: object) -> object:
        """Dispatch one command to its handler through the middleware chain.

        Returns:
            The handler response.

        Raises:
            IbtDispatchError: If no handler is registered for the command type.
        """
        return self._send_pipeline(command)

    def _invoke_handler(self, command: object) -> object:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise IbtDispatchError(
                f"No handler registered for command {type(command).__name__}. "
                "Register a handler before sending."
            )
        return handler(command)


def _callable_name(target: object) -> str:
    """Return a readable name for a subscriber callable."""
    owner = getattr(target, "__self__", None)
    if owner is not None:
        return f"{type(owner).__name__}.{getattr(target, '__name__', 'handle')}"
    return getattr(target, "__qualname__", type(target).__name__)
