"""Serializable snapshots of File values."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from filekit.file import File


class FileInfo(BaseModel):
    """Description of a path and what the filesystem reports about it."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    path: str
    url: str
    name: str
    parent_path: str = Field(alias="parentPath")
    parent_name: str = Field(alias="parentName")
    exists: bool = False
    is_directory: bool = Field(default=False, alias="isDirectory")

    @classmethod
    def from_file(cls, file: File) -> FileInfo:
        """Build a snapshot of a File.

        Args:
            file: File to describe. Its filesystem is queried once for
                existence and once for directory-ness.

        Returns:
            Populated FileInfo.
        """
        return cls(
            path=file.path,
            url=file.url,
            name=file.name,
            parent_path=file.parent_path,
            parent_name=file.parent_name,
            exists=file.exists(),
            is_directory=file.is_directory(),
        )
