"""Local filesystem implementation of the FileSystem collaborator."""

import logging
import os
import shutil
from pathlib import Path

from dircleaner.filesystem.models import DirectoryEntry, FileEntry, FileSystem

logger = logging.getLogger(__name__)


class LocalFileSystem(FileSystem):
    """FileSystem backed by the operating system.

    Symbolic links to directories are listed but never descended into
    during recursive enumeration. Deleting one removes only the link.
    """

    def path_is_directory(self, path: str) -> bool:
        return Path(path).is_dir()

    def list_subdirectories(self, path: str, recursive: bool) -> list[DirectoryEntry]:
        entries: list[DirectoryEntry] = []

        if recursive:
            for dirpath, dirnames, _ in os.walk(path, onerror=self._log_walk_error):
                for name in dirnames:
                    entries.append(DirectoryEntry(name=name, path=os.path.join(dirpath, name)))
        else:
            with os.scandir(path) as it:
                for entry in it:
                    if entry.is_dir():
                        entries.append(DirectoryEntry(name=entry.name, path=entry.path))

        entries.sort(key=lambda e: e.path)
        return entries

    def list_files(self, path: str) -> list[FileEntry]:
        files: list[FileEntry] = []

        with os.scandir(path) as it:
            for entry in it:
                try:
                    if not entry.is_file():
                        continue
                    size = entry.stat().st_size
                except FileNotFoundError:
                    # Removed between listing and stat
                    logger.debug("File vanished while listing: %s", entry.path)
                    continue
                files.append(FileEntry(name=entry.name, path=entry.path, size_bytes=size))

        files.sort(key=lambda f: f.path)
        return files

    def delete_file(self, path: str) -> None:
        Path(path).unlink()

    def delete_directory_recursive(self, path: str) -> None:
        target = Path(path)
        if target.is_symlink():
            target.unlink()
        else:
            shutil.rmtree(target)

    @staticmethod
    def _log_walk_error(error: OSError) -> None:
        logger.warning("Cannot list directory %s: %s", error.filename, error.strerror)
