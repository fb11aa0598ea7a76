"""Unit tests for CLI command handling."""

from __future__ import annotations

import json
from pathlib import Path
from uuid import UUID

import pytest

from cli.main import main
from tests.fixture_paths import fixture_path, term_sheet_path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("IBT_SETTINGS_FILE", "IBT_INPUT_FILE_PATH", "IBT_OUTPUT_DIR", "IBT_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_cli_run_publishes_and_writes_notification(tmp_path: Path, capsys) -> None:
    """CLI run should print the correlation id and emit the partner B file."""
    args = [
        "--log-level",
        "error",
        "run",
        "--input",
        str(term_sheet_path("acme_bond.xml")),
        "--output-dir",
        str(tmp_path),
    ]

    exit_code = main(args)
    output = capsys.readouterr().out.strip()

    assert exit_code == 0 and UUID(output)
    assert (tmp_path / "InstrumentNotification.xml").exists()


def test_cli_run_returns_failure_for_incomplete_document(tmp_path: Path, capsys) -> None:
    """CLI run should exit non-zero when nothing was published."""
    args = [
        "run",
        "--input",
        str(term_sheet_path("wrong_isin_scheme.xml")),
        "--output-dir",
        str(tmp_path),
    ]

    exit_code = main(args)

    assert exit_code == 1 and capsys.readouterr().out == ""


def test_cli_run_reads_settings_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Settings file paths should be honored by the run command."""
    monkeypatch.chdir(Path(__file__).resolve().parents[3])
    settings = str(fixture_path("settings/valid_settings.yaml"))

    exit_code = main(["--settings", settings, "run", "--output-dir", str(tmp_path)])

    assert exit_code == 0 and (tmp_path / "InstrumentNotification.xml").exists()


def test_cli_extract_prints_record_json(capsys) -> None:
    """CLI extract should print the record as JSON."""
    exit_code = main(["extract", str(term_sheet_path("acme_bond.xml"))])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload == {
        "event_type": "9097",
        "ibt_type_code": "T1",
        "isin": "CH0000000000",
        "product_name_full": "Acme Bond",
    }


def test_cli_extract_fails_for_malformed_document(capsys) -> None:
    """CLI extract should exit non-zero for malformed input."""
    exit_code = main(["extract", str(term_sheet_path("malformed.xml"))])

    assert exit_code == 1 and capsys.readouterr().out == ""
