"""Unit tests for the cleanup CLI commands.

Tests for the dircleaner tv, movies and music commands.
"""

from pathlib import Path
from unittest.mock import patch

from dircleaner.cli.main import app
from dircleaner.filesystem.local import LocalFileSystem
from dircleaner.filesystem.runlog import LOG_FILE_NAME
from typer.testing import CliRunner

runner = CliRunner()


class ReadOnlyFileSystem(LocalFileSystem):
    """Local filesystem that refuses every deletion."""

    def delete_file(self, path: str) -> None:
        raise PermissionError(13, "Permission denied", path)

    def delete_directory_recursive(self, path: str) -> None:
        raise PermissionError(13, "Permission denied", path)


def _season(tv_tree: Path) -> Path:
    return tv_tree / "Show" / "Season 1"


class TestCleanPreview:
    """Tests for --preview."""

    def test_tv_preview_lists_orphans(self, tv_tree: Path) -> None:
        """Preview prints candidates and leaves the tree untouched."""
        result = runner.invoke(app, ["tv", "-path", str(tv_tree), "--preview"])

        assert result.exit_code == 0
        assert "Preview: 2 item(s) would be deleted" in result.output
        assert str(_season(tv_tree) / "Show.S01E02.nfo") in result.output
        assert str(_season(tv_tree) / "Show.S01E02-thumb.jpg") in result.output
        assert (_season(tv_tree) / "Show.S01E02.nfo").exists()
        assert not (tv_tree / LOG_FILE_NAME).exists()

    def test_long_path_option(self, movies_tree: Path) -> None:
        """--path is accepted as well as -path."""
        result = runner.invoke(app, ["movies", "--path", str(movies_tree), "--preview"])

        assert result.exit_code == 0
        assert str(movies_tree / "Gone Movie (2010)") in result.output
        assert "Some Movie (2015)" not in result.output

    def test_verbose_shows_pipeline_messages(self, music_tree: Path) -> None:
        """Verbose mode prints the messages collected by the pipeline."""
        result = runner.invoke(app, ["--verbose", "music", "-path", str(music_tree), "--preview"])

        assert result.exit_code == 0
        assert "2 leaf directories" in result.output
        assert "1 candidate(s) found" in result.output


class TestCleanDelete:
    """Tests for deleting runs."""

    def test_tv_deletes_orphans(self, tv_tree: Path) -> None:
        """Orphans are deleted and the run is logged in the root."""
        result = runner.invoke(app, ["tv", "-path", str(tv_tree)])

        assert result.exit_code == 0
        assert "Deleted 2 item(s)" in result.output
        assert not (_season(tv_tree) / "Show.S01E02.nfo").exists()
        assert (_season(tv_tree) / "Show.S01E01.mkv").exists()
        assert (tv_tree / LOG_FILE_NAME).exists()

    def test_music_deletes_albums(self, music_tree: Path) -> None:
        """Albums without audio are removed."""
        result = runner.invoke(app, ["music", "-path", str(music_tree)])

        assert result.exit_code == 0
        assert "Deleted 1 item(s)" in result.output
        assert not (music_tree / "Artist" / "Gone Album").exists()

    def test_nothing_to_clean_is_silent(self, tv_tree: Path) -> None:
        """A second run finds nothing and exits cleanly without an error."""
        runner.invoke(app, ["tv", "-path", str(tv_tree)])

        result = runner.invoke(app, ["tv", "-path", str(tv_tree)])

        assert result.exit_code == 0
        assert "Error" not in result.output
        assert "Deleted" not in result.output

    def test_settings_log_file_name(self, tv_tree: Path, tmp_path: Path) -> None:
        """The run log name comes from the settings file."""
        settings_file = tmp_path / "settings.toml"
        settings_file.write_text('log_file_name = "removed.txt"\n')

        result = runner.invoke(
            app, ["tv", "-path", str(tv_tree), "--config", str(settings_file)]
        )

        assert result.exit_code == 0
        assert (tv_tree / "removed.txt").exists()

    def test_settings_threshold_override(self, movies_tree: Path, tmp_path: Path) -> None:
        """A raised movies threshold turns the intact movie into a candidate."""
        settings_file = tmp_path / "settings.toml"
        settings_file.write_text("[movies]\nthreshold = 200\n")

        result = runner.invoke(
            app,
            ["movies", "-path", str(movies_tree), "--preview", "-c", str(settings_file)],
        )

        assert result.exit_code == 0
        assert "Preview: 3 item(s) would be deleted" in result.output


class TestCleanErrors:
    """Tests for reported failures."""

    def test_missing_directory(self, tmp_path: Path) -> None:
        """A nonexistent root is reported and exits non-zero."""
        result = runner.invoke(app, ["tv", "-path", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Directory not found" in result.output

    def test_empty_path(self) -> None:
        """An empty root is reported and exits non-zero."""
        result = runner.invoke(app, ["movies", "-path", ""])

        assert result.exit_code == 1
        assert "Path name cannot be empty" in result.output

    def test_no_path_shows_help(self) -> None:
        """Without a path the command prints its usage."""
        result = runner.invoke(app, ["music"])

        assert result.exit_code == 0
        assert "Usage" in result.output

    def test_missing_settings_file(self, tv_tree: Path, tmp_path: Path) -> None:
        """An explicit settings file that does not exist is an error."""
        result = runner.invoke(
            app, ["tv", "-path", str(tv_tree), "--config", str(tmp_path / "nope.toml")]
        )

        assert result.exit_code == 1
        assert "Settings file not found" in result.output

    def test_deletion_error_aborts(self, tv_tree: Path) -> None:
        """A refused deletion aborts the run."""
        with patch("dircleaner.cli.commands.clean.LocalFileSystem", ReadOnlyFileSystem):
            result = runner.invoke(app, ["tv", "-path", str(tv_tree)])

        assert result.exit_code == 1
        assert "Failed to delete" in result.output
        assert "0 item(s) deleted before aborting" in result.output
        assert (_season(tv_tree) / "Show.S01E02.nfo").exists()

    def test_keep_going_reports_each_failure(self, tv_tree: Path) -> None:
        """With --keep-going every failure is reported and the run exits non-zero."""
        with patch("dircleaner.cli.commands.clean.LocalFileSystem", ReadOnlyFileSystem):
            result = runner.invoke(app, ["tv", "-path", str(tv_tree), "--keep-going"])

        assert result.exit_code == 1
        assert result.output.count("Could not delete") == 2
        assert "Deleted 0 item(s)" in result.output
