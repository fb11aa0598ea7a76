"""Runtime configuration model for IBT ingestion.

This module owns all environment variable and settings-file parsing.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, cast

import yaml

from core.constants import (
    DEFAULT_INPUT_FILE_PATH,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_DIR,
    SETTINGS_KEY_INPUT_FILE_PATH,
    SETTINGS_KEY_LOG_LEVEL,
    SETTINGS_KEY_OUTPUT_DIR,
    SUPPORTED_LOG_LEVELS,
    SUPPORTED_SETTINGS_KEYS,
)
from core.errors import IbtConfigError


@dataclass(frozen=True)
class IbtConfig:
    """Validated runtime configuration.

    Attributes:
        input_file_path: Term sheet document processed by one ingestion cycle.
        output_dir: Directory receiving the partner B notification file.
        log_level: Minimum structured log level.
    """

    input_file_path: Path
    output_dir: Path
    log_level: str

    @classmethod
    def from_env(cls) -> "IbtConfig":
        """Build config from process environment variables.

        ``IBT_SETTINGS_FILE`` points at an optional YAML settings file whose
        values are overridden by the ``IBT_*`` variables.

        Returns:
            A validated config object.

        Raises:
            IbtConfigError: If environment or settings values are invalid.
        """
        settings_path = os.getenv("IBT_SETTINGS_FILE")
        base = cls.from_settings_file(settings_path) if settings_path else cls.defaults()
        input_file_path = os.getenv("IBT_INPUT_FILE_PATH")
        output_dir = os.getenv("IBT_OUTPUT_DIR")
        log_level = os.getenv("IBT_LOG_LEVEL")
        return cls(
            input_file_path=Path(input_file_path) if input_file_path else base.input_file_path,
            output_dir=Path(output_dir) if output_dir else base.output_dir,
            log_level=_parse_log_level(log_level) if log_level else base.log_level,
        )

    @classmethod
    def from_settings_file(cls, settings_path: str) -> "IbtConfig":
        """Build config from a YAML settings file.

        Args:
            settings_path: Path to a YAML mapping with ``InputFilePath``,
                ``OutputDirectory`` and ``LogLevel`` keys, all optional.

        Returns:
            A validated config object.

        Raises:
            IbtConfigError: If the file is unreadable or has invalid values.
        """
        settings = _load_settings_mapping(settings_path)
        defaults = cls.defaults()
        input_file_path = _optional_string(settings, SETTINGS_KEY_INPUT_FILE_PATH)
        output_dir = _optional_string(settings, SETTINGS_KEY_OUTPUT_DIR)
        log_level = _optional_string(settings, SETTINGS_KEY_LOG_LEVEL)
        return cls(
            input_file_path=Path(input_file_path) if input_file_path else defaults.input_file_path,
            output_dir=Path(output_dir) if output_dir else defaults.output_dir,
            log_level=_parse_log_level(log_level) if log_level else defaults.log_level,
        )

    @classmethod
    def defaults(cls) -> "IbtConfig":
        """Return the configuration used when nothing is overridden."""
        return cls(
            input_file_path=DEFAULT_INPUT_FILE_PATH,
            output_dir=DEFAULT_OUTPUT_DIR,
            log_level=DEFAULT_LOG_LEVEL,
        )


def _parse_log_level(raw_value: str) -> str:
    """Parse and validate a log level value.

    Args:
        raw_value: Raw level string.

    Returns:
        Lower-cased supported level.

    Raises:
        IbtConfigError: If level is not supported.
    """
    normalized_value = raw_value.strip().lower()
    if normalized_value not in SUPPORTED_LOG_LEVELS:
        raise IbtConfigError(
            f"Invalid log level '{raw_value}': expected one of {SUPPORTED_LOG_LEVELS}. "
            "Set IBT_LOG_LEVEL or LogLevel to a supported value."
        )
    return normalized_value


def _load_settings_mapping(settings_path: str) -> Mapping[str, object]:
    settings_file = Path(settings_path).expanduser().resolve()
    if not settings_file.exists():
        raise IbtConfigError(
            f"Settings file does not exist at {settings_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(settings_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise IbtConfigError(
            f"Failed to read settings at {settings_file}: {error}. "
            "Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise IbtConfigError(
            f"Failed to parse YAML settings at {settings_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise IbtConfigError(
            f"Invalid settings at {settings_file}: expected a mapping, "
            f"got {type(payload).__name__}."
        )
    unknown_keys = sorted(str(key) for key in payload if key not in SUPPORTED_SETTINGS_KEYS)
    if unknown_keys:
        raise IbtConfigError(
            f"Invalid settings at {settings_file}: unsupported keys {unknown_keys}. "
            f"Supported keys: {SUPPORTED_SETTINGS_KEYS}."
        )
    return cast(Mapping[str, object], payload)


def _optional_string(settings: Mapping[str, object], key: str) -> str | None:
    value = settings.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise IbtConfigError(
            f"Invalid settings value for '{key}': expected string, got {type(value).__name__}."
        )
    return value
