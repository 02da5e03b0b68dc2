"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def basic_plugin_root(fixtures_root: Path) -> Path:
    """Return the primary fixture plugin path (read-only)."""
    return fixtures_root / "plugins" / "basic"


@pytest.fixture()
def plugin_root(basic_plugin_root: Path, tmp_path: Path) -> Path:
    """Return a writable copy of the fixture plugin."""
    destination = tmp_path / "plugin"
    shutil.copytree(basic_plugin_root, destination)
    return destination
