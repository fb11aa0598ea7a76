"""IBT exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations

from typing import Literal

ParseFailureKind = Literal[
    "empty_input",
    "file_not_found",
    "io_error",
    "access_denied",
    "malformed",
    "incomplete_fields",
]


class IbtError(Exception):
    """Base exception for all IBT ingestion failures."""


class IbtConfigError(IbtError):
    """Raised for invalid runtime configuration."""


class IbtParseError(IbtError):
    """Raised when a term sheet cannot be turned into a complete record.

    Attributes:
        kind: Failure classification used for log severity and reporting.
    """

    def __init__(self, message: str, kind: ParseFailureKind) -> None:
        super().__init__(message)
        self.kind: ParseFailureKind = kind


class IbtDispatchError(IbtError):
    """Raised when a command cannot be routed to a handler."""


class IbtConsumerError(IbtError):
    """Raised when a downstream handler side effect fails."""
