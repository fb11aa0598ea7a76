"""Unit tests for input reader module."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import IbtParseError
from ingest.input_reader import read_document_bytes
from tests.fixture_paths import term_sheet_path


def test_read_document_bytes_reads_whole_file() -> None:
    """Reader should return the full document content."""
    content = read_document_bytes(term_sheet_path("IBT.xml"))

    assert content.startswith(b"<?xml") and content.rstrip().endswith(b"</IBTTermSheet>")


def test_read_document_bytes_keeps_byte_order_mark(tmp_path: Path) -> None:
    """Byte order marks should reach the parser undecoded."""
    document = tmp_path / "bom.xml"
    document.write_bytes(b"\xef\xbb\xbf<IBTTermSheet/>")

    assert read_document_bytes(str(document)) == b"\xef\xbb\xbf<IBTTermSheet/>"


@pytest.mark.parametrize("source_path", [None, ""])
def test_read_document_bytes_rejects_empty_path(source_path: str | None) -> None:
    """Empty paths should be classified as empty input."""
    with pytest.raises(IbtParseError) as error_info:
        read_document_bytes(source_path)

    assert error_info.value.kind == "empty_input"


def test_read_document_bytes_raises_for_missing_path(tmp_path: Path) -> None:
    """Reader should fail when the file is missing."""
    missing_path = tmp_path / "does-not-exist.xml"

    with pytest.raises(IbtParseError) as error_info:
        read_document_bytes(missing_path)

    assert error_info.value.kind == "file_not_found"


def test_read_document_bytes_raises_for_directory(tmp_path: Path) -> None:
    """Directories are not term sheet files."""
    with pytest.raises(IbtParseError) as error_info:
        read_document_bytes(tmp_path)

    assert error_info.value.kind == "file_not_found"


def test_read_document_bytes_classifies_permission_errors(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Permission failures should be reported as access denied."""
    document = tmp_path / "locked.xml"
    document.write_text("<IBTTermSheet/>", encoding="utf-8")

    def _denied(self: Path) -> bytes:
        raise PermissionError("denied")

    monkeypatch.setattr(Path, "read_bytes", _denied)

    with pytest.raises(IbtParseError) as error_info:
        read_document_bytes(document)

    assert error_info.value.kind == "access_denied"


def test_read_document_bytes_classifies_io_errors(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Other OS failures should be reported as IO errors."""
    document = tmp_path / "broken.xml"
    document.write_text("<IBTTermSheet/>", encoding="utf-8")

    def _broken(self: Path) -> bytes:
        raise OSError("device not ready")

    monkeypatch.setattr(Path, "read_bytes", _broken)

    with pytest.raises(IbtParseError) as error_info:
        read_document_bytes(document)

    assert error_info.value.kind == "io_error" and isinstance(error_info.value.__cause__, OSError)
