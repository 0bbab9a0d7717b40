"""Exceptions raised by filekit."""

from __future__ import annotations


class FileKitError(Exception):
    """Base error for filekit operations."""

    pass


class ParentNotFoundError(FileKitError, FileNotFoundError):
    """Listing fell back to a parent directory that does not exist."""

    def __init__(self, path: str) -> None:
        """Initialize the error.

        Args:
            path: Path whose contents were requested.
        """
        super().__init__(f"Parent directory not found: {path}")
        self.path = path
