"""Filesystem domain models and the filesystem collaborator interface.

The cleanup engine never touches the operating system directly. It reads
directory listings and issues deletions through a ``FileSystem``
implementation, which keeps the classification logic testable against
in-memory or temporary trees.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from dircleaner.core.size import Size


class PathType(str, Enum):
    """Type of filesystem entry a cleanup run removes.

    Attributes:
        DIRECTORY: Whole directory, removed recursively.
        FILE: Single regular file.
    """

    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """Directory discovered while listing a tree.

    Attributes:
        name: Directory name (last path component).
        path: Full path to the directory.
    """

    name: str
    path: str

    @property
    def is_special(self) -> bool:
        """Dot-directories (e.g. ``.thumbnails``) are invisible to the engine."""
        return self.name.startswith(".")


def _split_extension(name: str) -> tuple[str, str]:
    stem, dot, extension = name.rpartition(".")
    if not dot:
        return name, ""
    # A trailing dot is not an extension
    if not extension:
        return stem, ""
    return stem, dot + extension


@dataclass(frozen=True, slots=True)
class FileEntry:
    """Snapshot of a regular file taken at listing time.

    Attributes:
        name: File name including extension.
        path: Full path to the file.
        size_bytes: File length in bytes when listed.
    """

    name: str
    path: str
    size_bytes: int

    def __post_init__(self) -> None:
        """Validate file entry data after initialization."""
        if not self.name:
            msg = "File name cannot be empty"
            raise ValueError(msg)
        if self.size_bytes < 0:
            msg = f"File size cannot be negative, got {self.size_bytes}"
            raise ValueError(msg)

    @property
    def stem(self) -> str:
        """File name without its last extension; empty for ``.DS_Store``."""
        return _split_extension(self.name)[0]

    @property
    def extension(self) -> str:
        """Last extension including the leading dot, case preserved.

        A name starting with its only dot is all extension, so ``.mkv``
        has the extension ``.mkv``.
        """
        return _split_extension(self.name)[1]

    @property
    def size(self) -> Size:
        return Size.of_bytes(self.size_bytes)


class FileSystem(ABC):
    """Abstract filesystem collaborator used by the cleanup engine.

    All operations are synchronous. Listing operations return entries
    sorted by path so runs are deterministic.
    """

    @abstractmethod
    def path_is_directory(self, path: str) -> bool:
        """Check whether ``path`` names an existing directory."""

    @abstractmethod
    def list_subdirectories(self, path: str, recursive: bool) -> list[DirectoryEntry]:
        """List subdirectories of ``path``.

        Args:
            path: Directory to list.
            recursive: If True, include subdirectories at every depth.

        Returns:
            Directory entries sorted by path.
        """

    @abstractmethod
    def list_files(self, path: str) -> list[FileEntry]:
        """List the regular files directly inside ``path``.

        Returns:
            File entries sorted by path.
        """

    @abstractmethod
    def delete_file(self, path: str) -> None:
        """Delete a single file.

        Raises:
            FileNotFoundError: If the file no longer exists.
            OSError: If the file cannot be deleted.
        """

    @abstractmethod
    def delete_directory_recursive(self, path: str) -> None:
        """Delete a directory and everything below it.

        A symbolic link to a directory is removed without touching its target.

        Raises:
            FileNotFoundError: If the directory no longer exists.
            OSError: If the directory cannot be deleted.
        """
