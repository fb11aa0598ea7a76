"""Term sheet field extraction.

This module parses namespaced term sheet XML, resolves the required
fields, and enforces the all-or-nothing completeness gate. Failures
are classified by ``IbtParseError.kind`` and logged exactly once.
"""

from __future__ import annotations

from pathlib import Path
from xml.etree import ElementTree

from core.constants import MISSING_FIELD_PLACEHOLDER
from core.errors import IbtParseError
from core.logging_config import get_logger
from core.types import ExtractedRecord
from ingest.field_queries import DEFAULT_FIELD_QUERIES, FieldQuery, resolve_fields
from ingest.input_reader import read_document_bytes

_LOGGER = get_logger(__name__)


class TermSheetParser:
    """Extract validated records from term sheet documents."""

    def __init__(self, queries: tuple[FieldQuery, ...] = DEFAULT_FIELD_QUERIES) -> None:
        self._queries = queries

    def parse_file(self, source_path: str | Path | None) -> ExtractedRecord | None:
        """Read a term sheet file and extract its record.

        Args:
            source_path: Path to the XML document.

        Returns:
            Extracted record, or ``None`` when reading or extraction failed.
        """
        try:
            content = read_document_bytes(source_path)
            return self.extract_record(content)
        except IbtParseError as error:
            _log_parse_failure(error, source=str(source_path))
            return None

    def parse_string(self, xml_content: str | None) -> ExtractedRecord | None:
        """Extract a record from term sheet text.

        Args:
            xml_content: Raw XML document text.

        Returns:
            Extracted record, or ``None`` when extraction failed.
        """
        try:
            return self.extract_record(xml_content)
        except IbtParseError as error:
            _log_parse_failure(error, source="string")
            return None

    def extract_record(self, xml_content: str | bytes | None) -> ExtractedRecord:
        """Extract a record from term sheet content or raise a classified error.

        Args:
            xml_content: Raw XML document text, or undecoded file bytes.

        Returns:
            Fully populated record.

        Raises:
            IbtParseError: With kind ``empty_input``, ``malformed`` or
                ``incomplete_fields``.
        """
        if not xml_content:
            raise IbtParseError("XML content is null or empty.", kind="empty_input")
        root = _parse_root(xml_content)
        values = resolve_fields(root, self._queries)
        return _build_record(values)


def _parse_root(xml_content: str | bytes) -> ElementTree.Element:
    """Parse document content into its root element.

    Raises:
        IbtParseError: If the document is not well-formed.
    """
    try:
        return ElementTree.fromstring(xml_content)
    except ElementTree.ParseError as error:
        raise IbtParseError(
            f"XML parsing error: {error}. The content might be malformed.",
            kind="malformed",
        ) from error


def _build_record(values: dict[str, str | None]) -> ExtractedRecord:
    """Build a record when every required field is non-empty.

    Raises:
        IbtParseError: If any field is missing or empty.
    """
    required_fields = ("event_type", "product_name_full", "ibt_type_code", "isin")
    missing_fields = [name for name in required_fields if not values.get(name)]
    if missing_fields:
        found = {name: values.get(name) or MISSING_FIELD_PLACEHOLDER for name in required_fields}
        raise IbtParseError(
            "One or more required fields could not be extracted from the XML content: "
            + ", ".join(f"{name}='{value}'" for name, value in found.items()),
            kind="incomplete_fields",
        )
    return ExtractedRecord(
        event_type=str(values["event_type"]),
        product_name_full=str(values["product_name_full"]),
        ibt_type_code=str(values["ibt_type_code"]),
        isin=str(values["isin"]),
    )


def _log_parse_failure(error: IbtParseError, source: str) -> None:
    """Log one record for a failed extraction.

    Incomplete documents were well-formed and log a warning; every other
    failure kind logs an error carrying the underlying cause.
    """
    if error.kind == "incomplete_fields":
        _LOGGER.warning("term_sheet_incomplete", source=source, kind=error.kind, reason=str(error))
        return
    cause = error.__cause__
    _LOGGER.error(
        "term_sheet_parse_failed",
        source=source,
        kind=error.kind,
        reason=str(error),
        cause=repr(cause) if cause is not None else None,
    )
