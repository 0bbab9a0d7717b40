"""Application context for dependency injection.

This module separates object creation from object use. CLI commands get
their filesystem from an ``AppContext``; tests construct one directly with
a test double.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from filekit.file import File, _default_filesystem
from filekit.protocols import FileSystem


@dataclass
class AppContext:
    """Container for application dependencies."""

    filesystem: FileSystem = field(default_factory=_default_filesystem)

    def file(self, path: str) -> File:
        """Create a File bound to this context's filesystem.

        Args:
            path: Raw path string.

        Returns:
            File with a normalized path.
        """
        return File(path, self.filesystem)


def create_context(home_dir: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Args:
        home_dir: Override the home directory used for ``~`` expansion.

    Returns:
        Configured AppContext.
    """
    from filekit.filesystem import RealFileSystem

    return AppContext(filesystem=RealFileSystem(home=home_dir))
