"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

MB = 1024 * 1024
KB = 1024

MakeFile = Callable[..., Path]


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory outside the test tree."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def make_file() -> MakeFile:
    """Create a file of a given apparent size, creating parent directories.

    Files are sparse, so multi-hundred-megabyte media files cost no disk space.
    """

    def _make(path: Path, size: int = 0) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.truncate(size)
        return path

    return _make


@pytest.fixture
def tv_tree(tmp_path: Path, make_file: MakeFile) -> Path:
    """TV library with one complete episode and one removed episode.

    TV Shows/
      Show/
        Season 1/
          Show.S01E01.mkv         (main)
          Show.S01E01.en.srt      (matches main)
          Show.S01E01-thumb.jpg   (matches main)
          Show.S01E02.nfo         (orphan)
          Show.S01E02-thumb.jpg   (orphan)
          folder.jpg              (never touched)
        .actors/
    """
    root = tmp_path / "TV Shows"
    season = root / "Show" / "Season 1"
    make_file(season / "Show.S01E01.mkv", 2 * MB)
    make_file(season / "Show.S01E01.en.srt", 40 * KB)
    make_file(season / "Show.S01E01-thumb.jpg", 90 * KB)
    make_file(season / "Show.S01E02.nfo", 3 * KB)
    make_file(season / "Show.S01E02-thumb.jpg", 80 * KB)
    make_file(season / "folder.jpg", 200 * KB)
    (root / "Show" / ".actors").mkdir()
    return root


@pytest.fixture
def movies_tree(tmp_path: Path, make_file: MakeFile) -> Path:
    """Movie library with one intact movie and two emptied folders.

    Movies/
      Gone Movie (2010)/          poster.jpg          (candidate)
      Movie Set/
        Another Movie (2011)/     fanart.jpg, .nfo    (candidate)
      Some Movie (2015)/          movie.mkv 150 MB    (kept)
    """
    root = tmp_path / "Movies"
    make_file(root / "Some Movie (2015)" / "Some Movie (2015).mkv", 150 * MB)
    make_file(root / "Some Movie (2015)" / "poster.jpg", 300 * KB)
    make_file(root / "Gone Movie (2010)" / "poster.jpg", 300 * KB)
    make_file(root / "Movie Set" / "Another Movie (2011)" / "fanart.jpg", 1 * MB)
    make_file(root / "Movie Set" / "Another Movie (2011)" / "Another Movie (2011).nfo", 4 * KB)
    return root


@pytest.fixture
def music_tree(tmp_path: Path, make_file: MakeFile) -> Path:
    """Music library with one intact album and one album without audio.

    Music/
      Artist/
        Kept Album/     track01.mp3, cover.jpg   (kept)
        Gone Album/     cover.jpg, artist.nfo    (candidate)
    """
    root = tmp_path / "Music"
    make_file(root / "Artist" / "Kept Album" / "track01.mp3", 4 * MB)
    make_file(root / "Artist" / "Kept Album" / "cover.jpg", 120 * KB)
    make_file(root / "Artist" / "Gone Album" / "cover.jpg", 120 * KB)
    make_file(root / "Artist" / "Gone Album" / "artist.nfo", 2 * KB)
    return root
