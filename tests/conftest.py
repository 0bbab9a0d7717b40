"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from filekit.context import AppContext
from filekit.filesystem import RealFileSystem


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Override home directory for testing."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    return home


@pytest.fixture
def real_fs(tmp_path: Path) -> RealFileSystem:
    """Create a real filesystem with its home inside tmp_path."""
    return RealFileSystem(home=tmp_path)


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_dir.return_value = False
    fs.listdir.return_value = []
    fs.home_dir.return_value = "/home/tester"
    return fs


@pytest.fixture
def mock_context(mock_filesystem: MagicMock) -> AppContext:
    """Create an AppContext wired to the mock filesystem."""
    return AppContext(filesystem=mock_filesystem)
