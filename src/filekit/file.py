"""Immutable file path value with filesystem queries and actions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Any
from urllib.parse import quote, unquote, urlparse

from filekit.errors import ParentNotFoundError
from filekit.pathops import SEPARATOR, base_name, format_path, parent_name, parent_path
from filekit.protocols import FileSystem

logger = logging.getLogger(__name__)


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from filekit.filesystem import RealFileSystem

    return RealFileSystem()


@dataclass(frozen=True)
class File:
    """A file or directory identified by a normalized absolute path.

    The path is normalized once at construction and never changes.
    Derived values (``parent``, ``append``) are new instances sharing the
    same filesystem. Equality and hashing consider the path only.

    Attributes:
        path: Normalized absolute path.
        filesystem: Provider used for existence checks and I/O.
    """

    path: str
    filesystem: FileSystem = field(default_factory=_default_filesystem, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Normalize the path."""
        raw = self.path.as_posix() if isinstance(self.path, PurePath) else self.path
        home = self.filesystem.home_dir() if raw.startswith("~") else None
        object.__setattr__(self, "path", format_path(raw, home=home))

    @classmethod
    def from_url(cls, url: str | PurePath, filesystem: FileSystem | None = None) -> File:
        """Create a File from a ``file://`` URL or a path object.

        Strings without a scheme are taken as plain paths, so characters
        such as ``#`` and ``?`` stay part of the path.

        Args:
            url: A ``file://`` URL string or a ``pathlib`` path.
            filesystem: Provider to use. Defaults to the real filesystem.

        Returns:
            File for the URL's path.

        Raises:
            ValueError: If the URL has a scheme other than ``file``.
        """
        if isinstance(url, PurePath):
            raw = url.as_posix()
        else:
            parsed = urlparse(url)
            if parsed.scheme == "file":
                raw = unquote(parsed.path)
            elif not parsed.scheme:
                raw = url
            else:
                raise ValueError(f"Not a file URL: {url}")
        if filesystem is None:
            return cls(raw)
        return cls(raw, filesystem)

    def __str__(self) -> str:
        return self.path

    def __fspath__(self) -> str:
        return self.path

    @property
    def url(self) -> str:
        """The ``file://`` URL of this path."""
        return "file://" + quote(self.path)

    @property
    def name(self) -> str:
        """Name of this file or directory, ``/`` for the root."""
        return base_name(self.path)

    @property
    def parent_path(self) -> str:
        """Path of the parent directory."""
        return parent_path(self.path)

    @property
    def parent_name(self) -> str:
        """Name of the parent directory, empty for top-level paths."""
        return parent_name(self.path)

    @property
    def parent(self) -> File:
        """The parent directory as a File."""
        return File(self.parent_path, self.filesystem)

    def append(self, child_name: str) -> File:
        """Append a child name to this path.

        Args:
            child_name: File or directory name under this directory.

        Returns:
            New File for the child path.
        """
        return File(f"{self.path}{SEPARATOR}{child_name}", self.filesystem)

    def exists(self) -> bool:
        """Check whether a file or directory exists at this path."""
        return self.filesystem.exists(self.path)

    def is_directory(self) -> bool:
        """Check whether this path exists and is a directory."""
        return self.filesystem.is_dir(self.path)

    def create_directory(
        self,
        parents: bool = False,
        attributes: Mapping[str, Any] | None = None,
    ) -> bool:
        """Create a directory at this path.

        Args:
            parents: Create missing intermediate directories. Without it,
                creation fails if the parent does not exist.
            attributes: Attributes for the new directories, e.g. ``{"mode": 0o755}``.

        Returns:
            True if the directory exists after creation, False if the path
            already existed and nothing was done.

        Raises:
            OSError: If the filesystem refuses to create the directory.
        """
        if self.exists():
            logger.debug("Not creating %s: path already exists", self.path)
            return False
        self.filesystem.mkdir(self.path, parents=parents, attributes=attributes)
        return self.exists()

    def write(self, data: Mapping[str, Any]) -> None:
        """Write a dictionary to this path as a property list.

        Args:
            data: Dictionary to write.

        Raises:
            OSError: If the file cannot be written.
        """
        self.filesystem.write_plist(self.path, data)

    def list_contents(self) -> list[str]:
        """List the contents of this directory.

        For a path that is not a directory, the listing falls back two
        levels: when the parent is a directory, the parent's parent is
        listed.

        Returns:
            Entry names.

        Raises:
            ParentNotFoundError: If neither this path nor its parent is a directory.
            OSError: If the directory cannot be read.
        """
        if self.is_directory():
            return self.filesystem.listdir(self.path)

        parent = self.parent
        if parent.is_directory():
            logger.debug("%s is not a directory, listing %s", self.path, parent.parent_path)
            return self.filesystem.listdir(parent.parent_path)
        raise ParentNotFoundError(self.path)
