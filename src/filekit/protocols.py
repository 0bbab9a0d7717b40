"""Protocol definitions for the filesystem provider.

``File`` never touches the operating system directly. Every query and
action goes through an object satisfying ``FileSystem``, so tests can
substitute a double without inheritance.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Paths are passed as normalized absolute path strings.
    """

    def exists(self, path: str) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False if it does not or cannot be determined.
        """
        ...

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory.

        Args:
            path: Path to check.

        Returns:
            True if path exists and is a directory, False otherwise.
        """
        ...

    def mkdir(
        self,
        path: str,
        parents: bool = False,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            parents: Create missing intermediate directories.
            attributes: Attributes for the new directories.

        Raises:
            OSError: If the directory cannot be created.
        """
        ...

    def listdir(self, path: str) -> list[str]:
        """List the entry names of a directory.

        Args:
            path: Directory to list.

        Returns:
            Entry names, without the directory prefix.

        Raises:
            OSError: If the directory cannot be read.
        """
        ...

    def write_plist(self, path: str, data: Mapping[str, Any]) -> None:
        """Write a dictionary to a property list file.

        Args:
            path: Destination file.
            data: Dictionary to serialize.

        Raises:
            OSError: If the file cannot be written.
            TypeError: If data holds values a property list cannot encode.
        """
        ...

    def home_dir(self) -> str:
        """Get the current user's home directory.

        Returns:
            Home directory path.
        """
        ...
