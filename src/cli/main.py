"""IBT CLI entry points.

This module exposes the one-shot ingestion run and single-document
extraction. It maps argparse commands onto the ingestion SDK.
"""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict, replace
from pathlib import Path
from typing import Any, Sequence

from core.config import IbtConfig
from core.constants import SUPPORTED_LOG_LEVELS
from core.logging_config import configure_logging
from dispatch.wiring import build_mediator
from ingest.term_sheet_parser import TermSheetParser
from ingest.worker import run_ingestion_cycle


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="ibt", description="IBT term sheet ingestion CLI")
    parser.add_argument("--settings", help="YAML settings file, overrides IBT_SETTINGS_FILE")
    parser.add_argument(
        "--log-level",
        choices=SUPPORTED_LOG_LEVELS,
        help="Override IBT_LOG_LEVEL for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_run_command(subparsers)
    _add_extract_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the IBT CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = _build_config(args.settings, args.log_level)
    configure_logging(config.log_level)
    if args.command == "run":
        return _run_ingestion_command(config, args)
    if args.command == "extract":
        return _run_extract_command(args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(settings_path: str | None, log_level: str | None) -> IbtConfig:
    """Build config with optional settings file and log-level overrides.

    Args:
        settings_path: Optional YAML settings file.
        log_level: Optional log level override.

    Returns:
        Configured runtime settings.
    """
    config = IbtConfig.from_settings_file(settings_path) if settings_path else IbtConfig.from_env()
    if log_level:
        config = replace(config, log_level=log_level)
    return config


def _run_ingestion_command(config: IbtConfig, args: argparse.Namespace) -> int:
    """Handle run command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code, zero when an event was published.
    """
    if args.input:
        config = replace(config, input_file_path=Path(args.input))
    if args.output_dir:
        config = replace(config, output_dir=Path(args.output_dir))
    event = run_ingestion_cycle(config, TermSheetParser(), build_mediator(config))
    if event is None:
        return 1
    print(event.correlation_id)
    return 0


def _run_extract_command(args: argparse.Namespace) -> int:
    """Handle extract command.

    Args:
        args: Parsed CLI args.

    Returns:
        Exit code, zero when all fields were extracted.
    """
    record = TermSheetParser().parse_file(args.source)
    if record is None:
        return 1
    print(json.dumps(asdict(record), sort_keys=True))
    return 0


def _add_run_command(subparsers: Any) -> None:
    """Register run subcommand."""
    parser = subparsers.add_parser("run", help="Run one ingestion cycle")
    parser.add_argument("--input", help="Term sheet path, overrides InputFilePath")
    parser.add_argument("--output-dir", help="Directory for the partner B notification file")


def _add_extract_command(subparsers: Any) -> None:
    """Register extract subcommand."""
    parser = subparsers.add_parser("extract", help="Extract fields from one term sheet")
    parser.add_argument("source", help="Term sheet XML file")
