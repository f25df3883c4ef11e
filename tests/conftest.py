# tests/conftest.py

"""Shared pytest fixtures for all jewel_search tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from src.catalog.loader import load_default_catalog


@pytest.fixture(autouse=True)
def isolated_logs_dir(tmp_path: Path) -> Generator[None, None, None]:
    """Send per-run log files to a temporary ``logs/`` directory."""
    with patch(
        "src.config.settings.Settings.LOGS_DIR", tmp_path / "logs"
    ):
        yield


@pytest.fixture(autouse=True)
def fresh_default_catalog() -> Generator[None, None, None]:
    """Drop the cached default catalog between tests."""
    load_default_catalog.cache_clear()
    yield
    load_default_catalog.cache_clear()
