"""Cross-cutting command middleware.

This module wraps command dispatch with timing and correlation logging.
Middleware observe pass/fail and elapsed time but never alter responses.
"""

from __future__ import annotations

import time
from typing import Callable, Sequence
from uuid import UUID

from core.constants import NIL_CORRELATION_ID
from core.logging_config import get_logger
from core.types import CorrelatedMessage

_LOGGER = get_logger(__name__)

CommandHandler = Callable[[object], object]
Middleware = Callable[[object, CommandHandler], object]


def correlation_id_of(message: object) -> UUID:
    """Return the message correlation id, or the nil id for bare messages."""
    if isinstance(message, CorrelatedMessage):
        return message.correlation_id
    return NIL_CORRELATION_ID


def log_command_timing(command: object, next_handler: CommandHandler) -> object:
    """Log start, outcome, and elapsed time around one command dispatch.

    Args:
        command: Command being dispatched.
        next_handler: Remaining dispatch chain, invoked exactly once.

    Returns:
        The unchanged response of ``next_handler``.
    """
    command_name = type(command).__name__
    correlation_id = str(correlation_id_of(command))
    _LOGGER.info(
        "command_handling",
        command=command_name,
        correlation_id=correlation_id,
        payload=repr(command),
    )
    started_at = time.monotonic()
    try:
        response = next_handler(command)
    except Exception as error:
        _LOGGER.error(
            "command_failed",
            command=command_name,
            correlation_id=correlation_id,
            elapsed_ms=_elapsed_ms(started_at),
            error=str(error),
        )
        raise
    _LOGGER.info(
        "command_handled",
        command=command_name,
        correlation_id=correlation_id,
        elapsed_ms=_elapsed_ms(started_at),
    )
    return response


def compose_middleware(
    handler: CommandHandler,
    middlewares: Sequence[Middleware],
) -> CommandHandler:
    """Wrap a handler so the first middleware runs outermost."""
    wrapped = handler
    for middleware in reversed(middlewares):
        wrapped = _bind(middleware, wrapped)
    return wrapped


def _bind(middleware: Middleware, next_handler: CommandHandler) -> CommandHandler:
    """Close one middleware over the rest of the chain."""

    def _invoke(command: object) -> object:
        return middleware(command, next_handler)

    return _invoke


def _elapsed_ms(started_at: float) -> float:
    """Return milliseconds elapsed since a monotonic start time."""
    return round((time.monotonic() - started_at) * 1000.0, 3)
