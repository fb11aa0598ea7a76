"""Namespace-aware path queries for term sheet fields.

This module declares the four required field queries and evaluates
them against a parsed document root with per-query error isolation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping
from xml.etree import ElementTree

from core.constants import ISIN_SCHEME_CODE, TERM_SHEET_NAMESPACE, TERM_SHEET_NAMESPACE_PREFIX
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)

TERM_SHEET_NAMESPACES: Mapping[str, str] = {TERM_SHEET_NAMESPACE_PREFIX: TERM_SHEET_NAMESPACE}


@dataclass(frozen=True)
class FieldQuery:
    """One required field and the path that resolves it.

    Attributes:
        field_name: Record attribute populated by this query.
        path: ElementTree path relative to the document root.
    """

    field_name: str
    path: str


DEFAULT_FIELD_QUERIES: tuple[FieldQuery, ...] = (
    FieldQuery("event_type", "./vt:Events/vt:Event/vt:EventType"),
    FieldQuery("product_name_full", "./vt:Instrument/vt:ProductNameFull"),
    FieldQuery("ibt_type_code", "./vt:Instrument/vt:IBTTypeCode"),
    FieldQuery("isin", f".//vt:InstrumentId[vt:IdSchemeCode='{ISIN_SCHEME_CODE}']/vt:IdValue"),
)


def resolve_fields(
    root: ElementTree.Element,
    queries: tuple[FieldQuery, ...] = DEFAULT_FIELD_QUERIES,
) -> dict[str, str | None]:
    """Evaluate every query against the document root.

    Args:
        root: Parsed term sheet root element.
        queries: Field queries to evaluate, independent of each other.

    Returns:
        Mapping from field name to resolved value, ``None`` when not found.
    """
    return {query.field_name: resolve_field(root, query) for query in queries}


def resolve_field(root: ElementTree.Element, query: FieldQuery) -> str | None:
    """Evaluate one query, treating invalid path evaluation as not found."""
    try:
        element = root.find(query.path, dict(TERM_SHEET_NAMESPACES))
    except SyntaxError as error:
        _LOGGER.error(
            "field_query_failed",
            field=query.field_name,
            path=query.path,
            error=str(error),
        )
        return None
    if element is None:
        return None
    return "".join(element.itertext())
