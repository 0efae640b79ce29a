"""Cleanup modes and their per-run profiles.

A profile bundles everything that differs between library layouts: the
size threshold above which a file counts as primary media, the recognized
media extensions, what kind of path is removed, which files are never
touched, and how extra file names are normalized.

Expected layouts:

    Movies/                     TV Shows/                  Music/
      Some Movie (2015)/          Show/                      Artist/
      Movie Set/                    Season 1/ <files>          Album/ <files>
        Another Movie (2010)/     Show (2008)/ <files>       Artist/ <files>
"""

from dataclasses import dataclass
from enum import Enum

from dircleaner.core.size import Size
from dircleaner.engine.naming import NORMALIZATION_STEPS, NameTransform
from dircleaner.filesystem.models import PathType


class Mode(str, Enum):
    """Library layout a cleanup run targets."""

    MOVIES = "movies"
    TV = "tv"
    MUSIC = "music"


VIDEO_EXTENSIONS: frozenset[str] = frozenset(
    {".avi", ".flv", ".mkv", ".mp4", ".mpeg", ".mpg", ".wmv", ".3gp"}
)

AUDIO_EXTENSIONS: frozenset[str] = frozenset(
    {".mp3", ".m4a", ".flac", ".wav", ".wma", ".aac", ".aiff", ".m4b", ".m4p", ".ogg"}
)

# Reusable default artwork (folder.jpg, folder.png) is never an orphan
FOLDER_ART_PREFIX = "folder"


@dataclass(frozen=True, slots=True)
class ModeProfile:
    """Configuration for one cleanup run.

    Attributes:
        mode: Library layout.
        threshold: Size above which a file (or below which a folder) is judged.
        extensions: Extensions that mark a file as primary media.
        target: Kind of path removed by this mode.
        excluded_prefixes: File name prefixes that are never considered.
        name_transforms: Ordered steps normalizing extra file names.
    """

    mode: Mode
    threshold: Size
    extensions: frozenset[str]
    target: PathType
    excluded_prefixes: tuple[str, ...] = ()
    name_transforms: tuple[NameTransform, ...] = ()


DEFAULT_PROFILES: dict[Mode, ModeProfile] = {
    Mode.MOVIES: ModeProfile(
        mode=Mode.MOVIES,
        threshold=Size.of_megabytes(100),
        extensions=VIDEO_EXTENSIONS,
        target=PathType.DIRECTORY,
    ),
    Mode.TV: ModeProfile(
        mode=Mode.TV,
        threshold=Size.of_megabytes(100),
        extensions=VIDEO_EXTENSIONS,
        target=PathType.FILE,
        excluded_prefixes=(FOLDER_ART_PREFIX,),
        name_transforms=NORMALIZATION_STEPS,
    ),
    Mode.MUSIC: ModeProfile(
        mode=Mode.MUSIC,
        threshold=Size.of_kilobytes(500),
        extensions=AUDIO_EXTENSIONS,
        target=PathType.DIRECTORY,
    ),
}


def default_profile(mode: Mode) -> ModeProfile:
    """Get the built-in profile for a mode."""
    return DEFAULT_PROFILES[mode]
