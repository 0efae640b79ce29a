"""Unit tests for DeletionOperator.

Tests file and directory deletion, tolerance of vanished paths, and the
abort-versus-keep-going behavior on OS errors.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from dircleaner.filesystem.local import LocalFileSystem
from dircleaner.filesystem.models import FileSystem, PathType
from dircleaner.filesystem.operator import DeletionAbortedError, DeletionOperator, DeletionResult


def _failing_filesystem(failing_path: str, error: OSError) -> MagicMock:
    """Create a mock filesystem whose file deletion fails for one path."""
    fs = MagicMock(spec=FileSystem)

    def delete_file(path: str) -> None:
        if path == failing_path:
            raise error

    fs.delete_file.side_effect = delete_file
    return fs


class TestDeletionOperator:
    """Tests for DeletionOperator."""

    def test_delete_files(self, tmp_path: Path) -> None:
        """Files are deleted one by one."""
        first = tmp_path / "a.nfo"
        second = tmp_path / "b.jpg"
        first.write_text("x")
        second.write_text("x")

        op = DeletionOperator(LocalFileSystem())
        results = op.delete([str(first), str(second)], PathType.FILE)

        assert results == [
            DeletionResult(path=str(first), success=True),
            DeletionResult(path=str(second), success=True),
        ]
        assert not first.exists()
        assert not second.exists()

    def test_delete_directories(self, tmp_path: Path) -> None:
        """Directories are deleted recursively."""
        target = tmp_path / "Gone Album"
        target.mkdir()
        (target / "cover.jpg").write_text("x")

        results = DeletionOperator(LocalFileSystem()).delete([str(target)], PathType.DIRECTORY)

        assert results[0].success is True
        assert not target.exists()

    def test_vanished_path_is_not_fatal(self, tmp_path: Path) -> None:
        """A path that no longer exists is skipped and the batch continues."""
        missing = tmp_path / "missing.nfo"
        present = tmp_path / "present.nfo"
        present.write_text("x")

        results = DeletionOperator(LocalFileSystem()).delete(
            [str(missing), str(present)], PathType.FILE
        )

        assert results[0].success is False
        assert results[0].missing is True
        assert results[0].error is not None
        assert "does not exist" in results[0].error
        assert results[1].success is True
        assert not present.exists()

    def test_os_error_aborts_batch(self) -> None:
        """By default the first OS error stops the remaining deletions."""
        fs = _failing_filesystem("/m/b.nfo", PermissionError(13, "Permission denied"))
        op = DeletionOperator(fs)

        with pytest.raises(DeletionAbortedError) as exc_info:
            op.delete(["/m/a.nfo", "/m/b.nfo", "/m/c.nfo"], PathType.FILE)

        assert exc_info.value.path == "/m/b.nfo"
        assert [r.success for r in exc_info.value.results] == [True, False]
        assert "Permission denied" in str(exc_info.value)
        assert [c.args[0] for c in fs.delete_file.call_args_list] == ["/m/a.nfo", "/m/b.nfo"]

    def test_keep_going_collects_failures(self) -> None:
        """With keep_going, failures are recorded and deletion continues."""
        fs = _failing_filesystem("/m/b.nfo", PermissionError(13, "Permission denied"))
        op = DeletionOperator(fs, keep_going=True)

        results = op.delete(["/m/a.nfo", "/m/b.nfo", "/m/c.nfo"], PathType.FILE)

        assert op.keep_going is True
        assert [r.success for r in results] == [True, False, True]
        assert results[1].missing is False
        assert fs.delete_file.call_count == 3

    def test_empty_batch(self) -> None:
        """Deleting nothing touches nothing."""
        fs = MagicMock(spec=FileSystem)

        assert DeletionOperator(fs).delete([], PathType.DIRECTORY) == []
        fs.delete_directory_recursive.assert_not_called()
