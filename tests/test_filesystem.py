"""Tests for the real filesystem provider."""

from __future__ import annotations

import logging
import plistlib
import stat
from pathlib import Path

import pytest

from filekit.filesystem import RealFileSystem
from filekit.protocols import FileSystem


class TestRealFileSystem:
    """Tests for RealFileSystem implementation."""

    def test_satisfies_protocol(self) -> None:
        """Test RealFileSystem is a FileSystem structurally."""
        assert isinstance(RealFileSystem(), FileSystem)

    def test_exists_true(self, tmp_path: Path) -> None:
        """Test exists returns True for existing path."""
        fs = RealFileSystem()
        test_file = tmp_path / "exists.txt"
        test_file.touch()

        assert fs.exists(str(test_file)) is True

    def test_exists_false(self, tmp_path: Path) -> None:
        """Test exists returns False for non-existent path."""
        fs = RealFileSystem()

        assert fs.exists(str(tmp_path / "missing.txt")) is False

    def test_is_dir_true(self, tmp_path: Path) -> None:
        """Test is_dir returns True for directory."""
        fs = RealFileSystem()
        test_dir = tmp_path / "subdir"
        test_dir.mkdir()

        assert fs.is_dir(str(test_dir)) is True

    def test_is_dir_false_for_file(self, tmp_path: Path) -> None:
        """Test is_dir returns False for file."""
        fs = RealFileSystem()
        test_file = tmp_path / "file.txt"
        test_file.touch()

        assert fs.is_dir(str(test_file)) is False

    def test_is_dir_false_for_missing(self, tmp_path: Path) -> None:
        """Test is_dir returns False for non-existent path."""
        fs = RealFileSystem()

        assert fs.is_dir(str(tmp_path / "missing")) is False

    def test_queries_false_for_overlong_name(self) -> None:
        """Test a name the OS rejects as too long reads as missing."""
        fs = RealFileSystem()
        too_long = "/" + "a" * 5000

        assert fs.exists(too_long) is False
        assert fs.is_dir(too_long) is False

    def test_mkdir_simple(self, tmp_path: Path) -> None:
        """Test creating a simple directory."""
        fs = RealFileSystem()
        new_dir = tmp_path / "newdir"

        fs.mkdir(str(new_dir))

        assert new_dir.is_dir()

    def test_mkdir_parents(self, tmp_path: Path) -> None:
        """Test creating nested directories with parents=True."""
        fs = RealFileSystem()
        nested_dir = tmp_path / "a" / "b" / "c"

        fs.mkdir(str(nested_dir), parents=True)

        assert nested_dir.is_dir()

    def test_mkdir_missing_parent_raises(self, tmp_path: Path) -> None:
        """Test mkdir without parents raises FileNotFoundError."""
        fs = RealFileSystem()

        with pytest.raises(FileNotFoundError):
            fs.mkdir(str(tmp_path / "a" / "b"))

    def test_mkdir_existing_raises(self, tmp_path: Path) -> None:
        """Test mkdir raises FileExistsError for an existing directory."""
        fs = RealFileSystem()
        existing_dir = tmp_path / "existing"
        existing_dir.mkdir()

        with pytest.raises(FileExistsError):
            fs.mkdir(str(existing_dir))

    def test_mkdir_mode(self, tmp_path: Path) -> None:
        """Test the mode attribute sets permission bits."""
        fs = RealFileSystem()
        new_dir = tmp_path / "private"

        fs.mkdir(str(new_dir), attributes={"mode": 0o700})

        assert stat.S_IMODE(new_dir.stat().st_mode) == 0o700

    def test_mkdir_ignores_unknown_attributes(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test unsupported attributes are logged and ignored."""
        fs = RealFileSystem()
        new_dir = tmp_path / "plain"

        with caplog.at_level(logging.DEBUG, logger="filekit.filesystem"):
            fs.mkdir(str(new_dir), attributes={"owner": "root"})

        assert new_dir.is_dir()
        assert "owner" in caplog.text

    def test_listdir(self, tmp_path: Path) -> None:
        """Test listing entry names."""
        fs = RealFileSystem()
        (tmp_path / "a.txt").touch()
        (tmp_path / "sub").mkdir()

        assert sorted(fs.listdir(str(tmp_path))) == ["a.txt", "sub"]

    def test_listdir_missing_raises(self, tmp_path: Path) -> None:
        """Test listing a missing directory raises FileNotFoundError."""
        fs = RealFileSystem()

        with pytest.raises(FileNotFoundError):
            fs.listdir(str(tmp_path / "missing"))

    def test_write_plist(self, tmp_path: Path) -> None:
        """Test writing an XML property list."""
        fs = RealFileSystem()
        target = tmp_path / "data.plist"

        fs.write_plist(str(target), {"enabled": True, "nested": {"n": 1}})

        assert target.read_bytes().startswith(b"<?xml")
        with open(target, "rb") as fp:
            assert plistlib.load(fp) == {"enabled": True, "nested": {"n": 1}}

    def test_write_plist_unencodable_raises(self, tmp_path: Path) -> None:
        """Test values plist cannot encode raise TypeError."""
        fs = RealFileSystem()

        with pytest.raises(TypeError):
            fs.write_plist(str(tmp_path / "bad.plist"), {"missing": None})

    def test_write_plist_unencodable_keeps_existing_file(self, tmp_path: Path) -> None:
        """Test a failed write leaves the previous content intact."""
        fs = RealFileSystem()
        target = tmp_path / "settings.plist"
        fs.write_plist(str(target), {"keep": 1})

        with pytest.raises(TypeError):
            fs.write_plist(str(target), {"a": 1, "bad": None})

        with open(target, "rb") as fp:
            assert plistlib.load(fp) == {"keep": 1}

    def test_write_plist_missing_directory_raises(self, tmp_path: Path) -> None:
        """Test writing into a missing directory raises FileNotFoundError."""
        fs = RealFileSystem()

        with pytest.raises(FileNotFoundError):
            fs.write_plist(str(tmp_path / "nope" / "data.plist"), {})

    def test_home_dir_default(self, temp_home: Path) -> None:
        """Test home_dir falls back to Path.home()."""
        assert RealFileSystem().home_dir() == str(temp_home)

    def test_home_dir_override(self, tmp_path: Path) -> None:
        """Test home_dir returns the configured home."""
        assert RealFileSystem(home=tmp_path).home_dir() == str(tmp_path)
