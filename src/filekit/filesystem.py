"""Filesystem provider backed by the host operating system.

``RealFileSystem`` wraps ``os``, ``pathlib`` and ``plistlib`` and satisfies
the ``FileSystem`` protocol structurally.
"""

from __future__ import annotations

import logging
import os
import plistlib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Mode used when no "mode" attribute is given, same as os.mkdir
DEFAULT_DIR_MODE = 0o777


class RealFileSystem:
    """Production filesystem implementation."""

    def __init__(self, home: Path | str | None = None) -> None:
        """Initialize the filesystem.

        Args:
            home: Home directory used for ``~`` expansion. Defaults to ``Path.home()``.
        """
        self.home = Path(home) if home is not None else None

    def exists(self, path: str) -> bool:
        """Check if a path exists, False when it cannot be determined."""
        return os.path.exists(path)

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory, False when it cannot be determined."""
        return os.path.isdir(path)

    def mkdir(
        self,
        path: str,
        parents: bool = False,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        """Create a directory, honouring a ``mode`` attribute."""
        attributes = attributes or {}
        mode = attributes.get("mode", DEFAULT_DIR_MODE)
        ignored = sorted(key for key in attributes if key != "mode")
        if ignored:
            logger.debug("Ignoring unsupported directory attributes: %s", ", ".join(ignored))

        logger.debug("Creating directory %s (parents=%s, mode=%o)", path, parents, mode)
        if parents:
            os.makedirs(path, mode=mode)
        else:
            os.mkdir(path, mode=mode)

    def listdir(self, path: str) -> list[str]:
        """List the entry names of a directory."""
        return os.listdir(path)

    def write_plist(self, path: str, data: Mapping[str, Any]) -> None:
        """Write a dictionary as an XML property list.

        The dictionary is serialized before the target is opened, so an
        unencodable value leaves an existing file untouched.
        """
        payload = plistlib.dumps(dict(data), fmt=plistlib.FMT_XML)
        logger.debug("Writing property list to %s (%d bytes)", path, len(payload))
        with open(path, "wb") as fp:
            fp.write(payload)

    def home_dir(self) -> str:
        """Get the home directory, preferring the configured override."""
        return str(self.home or Path.home())
