"""Directory classification: root validation and leaf folder detection.

Media files are expected to live in leaf folders, i.e. folders without
regular subfolders. Dot-directories such as ``.thumbnails`` or ``.actors``
are ignored everywhere, so a folder that only contains dot-directories is
still a leaf.
"""

import logging
from collections.abc import Sequence

from dircleaner.core.failures import FailureReason
from dircleaner.core.result import Result, fail, succeed
from dircleaner.core.size import Size, SizeUnit
from dircleaner.filesystem.models import DirectoryEntry, FileSystem

logger = logging.getLogger(__name__)


class DirectoryClassifier:
    """Validates a root path and narrows its tree down to leaf directories.

    Args:
        filesystem: Filesystem collaborator to list directories through.
    """

    def __init__(self, filesystem: FileSystem) -> None:
        self._filesystem = filesystem

    def path_exists(self, path: str | None) -> Result[str, FailureReason]:
        """Validate that ``path`` is a non-blank existing directory.

        Blank paths are rejected before the filesystem is consulted.

        Args:
            path: Root path supplied by the user.

        Returns:
            Success with the unchanged path, or a failure with
            PATH_NAME_CANNOT_BE_EMPTY or DIRECTORY_NOT_FOUND.
        """
        if path is None or not path.strip():
            return fail(FailureReason.PATH_NAME_CANNOT_BE_EMPTY)

        if not self._filesystem.path_is_directory(path):
            logger.debug("Not a directory: %s", path)
            return fail(FailureReason.DIRECTORY_NOT_FOUND)

        return succeed(path)

    def list_directories(
        self, path: str, recursive: bool = True
    ) -> Result[list[DirectoryEntry], FailureReason]:
        """List subdirectories of ``path``.

        Args:
            path: Directory to list.
            recursive: If True, include every depth; otherwise only immediate children.

        Returns:
            Success with the directory entries, or SUBDIRECTORIES_DO_NOT_EXIST.
        """
        directories = self._filesystem.list_subdirectories(path, recursive=recursive)
        if not directories:
            return fail(FailureReason.SUBDIRECTORIES_DO_NOT_EXIST)
        return succeed(directories)

    def is_leaf_node(self, path: str) -> bool:
        """Check whether ``path`` has no subdirectories other than dot-directories."""
        children = self._filesystem.list_subdirectories(path, recursive=False)
        return not any(not child.is_special for child in children)

    def filter_leaf_directories(
        self, directories: Sequence[DirectoryEntry]
    ) -> Result[list[str], FailureReason]:
        """Keep the paths of non-special directories that are leaf nodes.

        Args:
            directories: Candidate directories, typically a recursive listing.

        Returns:
            Success with leaf directory paths (in input order), or
            NO_LEAF_NODES_FOUND.
        """
        leaves = [d.path for d in directories if not d.is_special and self.is_leaf_node(d.path)]
        if not leaves:
            return fail(FailureReason.NO_LEAF_NODES_FOUND)

        logger.debug("Found %d leaf directories", len(leaves))
        return succeed(leaves, f"{len(leaves)} leaf director{'y' if len(leaves) == 1 else 'ies'}")

    def directory_size(self, path: str, unit: SizeUnit = SizeUnit.MEGABYTES) -> Size:
        """Total size of the files directly inside ``path``.

        Bytes are summed first and converted once.

        Args:
            path: Directory to measure.
            unit: Unit of the returned size.

        Returns:
            Size of the top-level files, truncated to ``unit``.
        """
        total = sum(f.size_bytes for f in self._filesystem.list_files(path))
        return Size.of_bytes(total).to(unit)
