"""Deletion operator for cleanup candidates.

Deletes candidate paths one at a time through the FileSystem collaborator.
A candidate that has already vanished is recorded as a failed result and
skipped. Any other OS error aborts the remaining batch unless the operator
was created with ``keep_going=True``, in which case the failure is recorded
and deletion continues with the next candidate.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from dircleaner.filesystem.models import FileSystem, PathType

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeletionResult:
    """Result of deleting a single candidate.

    Attributes:
        path: Path that was operated on.
        success: Whether the path was deleted.
        error: Error message if the deletion failed, None otherwise.
        missing: Whether the path had already vanished before deletion.
    """

    path: str
    success: bool
    error: str | None = None
    missing: bool = False


class DeletionAbortedError(Exception):
    """Raised when an OS error stops a deletion batch part-way.

    Attributes:
        path: Candidate whose deletion failed.
        results: Results for the candidates processed before the failure,
            including the failed one.
    """

    def __init__(self, path: str, reason: str, results: list[DeletionResult]) -> None:
        super().__init__(f"Failed to delete {path}: {reason}")
        self.path = path
        self.results = results


class DeletionOperator:
    """Deletes cleanup candidates through a FileSystem.

    Attributes:
        _filesystem: Filesystem collaborator performing the deletions.
        _keep_going: If True, continue past failed deletions.
    """

    def __init__(self, filesystem: FileSystem, keep_going: bool = False) -> None:
        """Initialize the DeletionOperator.

        Args:
            filesystem: Filesystem collaborator performing the deletions.
            keep_going: If True, record OS errors and continue with the
                remaining candidates instead of aborting.
        """
        self._filesystem = filesystem
        self._keep_going = keep_going

    @property
    def keep_going(self) -> bool:
        return self._keep_going

    def delete(self, paths: Sequence[str], path_type: PathType) -> list[DeletionResult]:
        """Delete candidates in order and return one result per processed path.

        Args:
            paths: Candidate paths to delete.
            path_type: Whether the candidates are files or directories.

        Returns:
            List of DeletionResult, one per candidate.

        Raises:
            DeletionAbortedError: If a deletion fails with an OS error other
                than "not found" and keep_going is False.
        """
        results: list[DeletionResult] = []

        for path in paths:
            result = self._delete_single(path, path_type)
            results.append(result)

            if result.success or result.missing:
                continue
            if not self._keep_going:
                raise DeletionAbortedError(path, result.error or "unknown error", results)

        return results

    def _delete_single(self, path: str, path_type: PathType) -> DeletionResult:
        """Delete one candidate, converting OS errors into a failed result."""
        try:
            if path_type == PathType.DIRECTORY:
                self._filesystem.delete_directory_recursive(path)
            else:
                self._filesystem.delete_file(path)
        except FileNotFoundError:
            logger.warning("Already removed, skipping: %s", path)
            return DeletionResult(
                path=path,
                success=False,
                error=f"Path does not exist: {path}",
                missing=True,
            )
        except OSError as e:
            logger.error("Failed to delete %s: %s", path, e)
            return DeletionResult(path=path, success=False, error=str(e))

        logger.info("Deleted %s %s", path_type.value, path)
        return DeletionResult(path=path, success=True)
