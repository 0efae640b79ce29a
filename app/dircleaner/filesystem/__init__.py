"""Filesystem collaborators for the cleanup engine.

This module provides the filesystem interface and its local
implementation, the deletion operator, and the run log writer.
"""

from dircleaner.filesystem.local import LocalFileSystem
from dircleaner.filesystem.models import DirectoryEntry, FileEntry, FileSystem, PathType
from dircleaner.filesystem.operator import DeletionAbortedError, DeletionOperator, DeletionResult
from dircleaner.filesystem.runlog import LOG_FILE_NAME, LOG_HEADER, RunLogger

__all__ = [
    "LOG_FILE_NAME",
    "LOG_HEADER",
    "DeletionAbortedError",
    "DeletionOperator",
    "DeletionResult",
    "DirectoryEntry",
    "FileEntry",
    "FileSystem",
    "LocalFileSystem",
    "PathType",
    "RunLogger",
]
