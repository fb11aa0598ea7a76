"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from uuid import UUID

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def correlation_id() -> UUID:
    """Stable correlation id for one simulated cycle."""
    return UUID("3f2b8c1e-4d5a-4e6f-8a7b-9c0d1e2f3a4b")


@pytest.fixture
def processing_timestamp() -> datetime:
    """Stable UTC processing timestamp."""
    return datetime(2025, 5, 12, 8, 30, 15, 123456, tzinfo=timezone.utc)
