"""Core constants used across IBT modules.

This module centralizes document, dispatch, and configuration constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path
from uuid import UUID

TERM_SHEET_NAMESPACE = "http://schemas.vontobel.com/dataservice/v1.0"
TERM_SHEET_NAMESPACE_PREFIX = "vt"
ISIN_SCHEME_CODE = "I-"
INSTRUMENT_NOTIFICATION_EVENT_TYPE = "9097"
DEFAULT_INPUT_FILE_PATH = Path("IBT.xml")
DEFAULT_OUTPUT_DIR = Path(".")
PARTNER_B_OUTPUT_FILE_NAME = "InstrumentNotification.xml"
DEFAULT_LOG_LEVEL = "info"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
NIL_CORRELATION_ID = UUID(int=0)
MISSING_FIELD_PLACEHOLDER = "MISSING"
SETTINGS_KEY_INPUT_FILE_PATH = "InputFilePath"
SETTINGS_KEY_OUTPUT_DIR = "OutputDirectory"
SETTINGS_KEY_LOG_LEVEL = "LogLevel"
SUPPORTED_SETTINGS_KEYS = (
    SETTINGS_KEY_INPUT_FILE_PATH,
    SETTINGS_KEY_OUTPUT_DIR,
    SETTINGS_KEY_LOG_LEVEL,
)
