"""Path normalization and a small file object over the host filesystem."""

__version__ = "0.1.0"

from filekit.errors import FileKitError, ParentNotFoundError
from filekit.file import File
from filekit.filesystem import RealFileSystem
from filekit.models import FileInfo
from filekit.pathops import base_name, format_path, parent_name, parent_path
from filekit.protocols import FileSystem

__all__ = [
    "__version__",
    "File",
    "FileInfo",
    "FileKitError",
    "FileSystem",
    "ParentNotFoundError",
    "RealFileSystem",
    "base_name",
    "format_path",
    "parent_name",
    "parent_path",
]
