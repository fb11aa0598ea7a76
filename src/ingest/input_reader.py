"""Term sheet document readers for ingestion.

This module loads a whole term sheet document from the local file system.
Read failures are classified so the parser can log them consistently.
"""

from __future__ import annotations

from pathlib import Path

from core.errors import IbtParseError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def read_document_bytes(source_path: str | Path | None) -> bytes:
    """Read the full raw content of a term sheet file.

    The content is returned undecoded so the XML parser can honour the
    byte order mark and the encoding declaration of the document.

    Args:
        source_path: Path to the XML document.

    Returns:
        Document bytes.

    Raises:
        IbtParseError: If the path is empty, missing, or unreadable.
    """
    if source_path is None or not str(source_path):
        raise IbtParseError("XML file path is null or empty.", kind="empty_input")
    file_path = Path(source_path).expanduser()
    if not file_path.is_file():
        raise IbtParseError(
            f"XML file not found at path: {file_path}. Provide an existing term sheet file.",
            kind="file_not_found",
        )
    try:
        content = file_path.read_bytes()
    except PermissionError as error:
        raise IbtParseError(
            f"Access denied while reading XML file {file_path}: {error}. Check file permissions.",
            kind="access_denied",
        ) from error
    except OSError as error:
        raise IbtParseError(
            f"IO error reading XML file {file_path}: {error}.",
            kind="io_error",
        ) from error
    _LOGGER.debug("document_read", source_path=str(file_path), size=len(content))
    return content
