"""Orphan resolution: decide what to delete in each leaf directory.

Each mode has its own resolver:

- Movies: a leaf folder whose top-level files add up to less than the
  threshold has lost its movie file; the whole folder is a candidate.
- TV: extra files (artwork, subtitles, NFOs) whose normalized name is not
  part of any remaining video file name are candidates. When a folder has
  no video at all, every extra file is a candidate.
- Music: a leaf folder without any audio file is a candidate.

Main files are never candidates.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from dircleaner.core.failures import FailureReason
from dircleaner.core.result import Result, fail, succeed
from dircleaner.engine.classifier import DirectoryClassifier
from dircleaner.engine.naming import normalize_name
from dircleaner.engine.profiles import Mode, ModeProfile
from dircleaner.filesystem.models import FileEntry, FileSystem

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Classification:
    """Partition of a leaf directory's files.

    Attributes:
        main: Files judged to be primary media.
        extra: Everything else (artwork, subtitles, metadata).
    """

    main: tuple[FileEntry, ...]
    extra: tuple[FileEntry, ...]


def is_main_file(file: FileEntry, profile: ModeProfile) -> bool:
    """Check whether a file is primary media for the profile.

    A file is main if its size, truncated to the threshold's unit, is
    strictly above the threshold, or if its extension is recognized.
    """
    size = file.size.to(profile.threshold.unit)
    return size > profile.threshold or file.extension in profile.extensions


def partition_files(files: Iterable[FileEntry], profile: ModeProfile) -> Classification:
    """Split files into main and extra, preserving order."""
    main: list[FileEntry] = []
    extra: list[FileEntry] = []
    for file in files:
        (main if is_main_file(file, profile) else extra).append(file)
    return Classification(main=tuple(main), extra=tuple(extra))


def drop_excluded(files: Iterable[FileEntry], prefixes: Sequence[str]) -> list[FileEntry]:
    """Remove files whose name starts with any excluded prefix (case-sensitive)."""
    return [f for f in files if not any(f.name.startswith(p) for p in prefixes)]


def find_orphan_extras(classification: Classification, profile: ModeProfile) -> list[str]:
    """Return paths of extra files that no main file accounts for.

    Args:
        classification: Partitioned files of one directory.
        profile: Profile providing the name normalization steps.

    Returns:
        Paths of orphaned extra files, in listing order.
    """
    if not classification.main:
        return [f.path for f in classification.extra]

    orphans: list[str] = []
    for extra in classification.extra:
        base_name = normalize_name(extra.stem, profile.name_transforms)
        if not any(base_name in main.name for main in classification.main):
            orphans.append(extra.path)
    return orphans


class OrphanResolver(ABC):
    """Abstract base class for per-mode orphan resolvers.

    Resolvers turn a list of leaf directories into deletion candidates.

    Args:
        profile: Profile of the current run.
        filesystem: Filesystem collaborator to list files through.
    """

    def __init__(self, profile: ModeProfile, filesystem: FileSystem) -> None:
        self._profile = profile
        self._filesystem = filesystem

    @property
    def profile(self) -> ModeProfile:
        return self._profile

    def classify(self, path: str) -> Classification:
        """List and partition the files of one directory."""
        files = drop_excluded(self._filesystem.list_files(path), self._profile.excluded_prefixes)
        return partition_files(files, self._profile)

    @abstractmethod
    def resolve(self, leaf_directories: Sequence[str]) -> Result[list[str], FailureReason]:
        """Compute deletion candidates across all leaf directories.

        Args:
            leaf_directories: Leaf directory paths of the scanned tree.

        Returns:
            Success with candidate paths, or a failure when nothing qualifies.
        """


class MoviesResolver(OrphanResolver):
    """Whole leaf folders whose total top-level size is below the threshold."""

    def resolve(self, leaf_directories: Sequence[str]) -> Result[list[str], FailureReason]:
        classifier = DirectoryClassifier(self._filesystem)
        threshold = self._profile.threshold
        candidates: list[str] = []

        for path in leaf_directories:
            size = classifier.directory_size(path, unit=threshold.unit)
            if size < threshold:
                logger.debug("Below threshold (%s < %s): %s", size, threshold, path)
                candidates.append(path)

        if not candidates:
            return fail(FailureReason.SUBDIRECTORIES_BELOW_THRESHOLD_DO_NOT_EXIST)
        return succeed(candidates)


class TvResolver(OrphanResolver):
    """Extra files without a matching episode file."""

    def resolve(self, leaf_directories: Sequence[str]) -> Result[list[str], FailureReason]:
        candidates: list[str] = []
        for path in leaf_directories:
            orphans = find_orphan_extras(self.classify(path), self._profile)
            if orphans:
                logger.debug("%d orphaned file(s) in %s", len(orphans), path)
            candidates.extend(orphans)

        if not candidates:
            return fail(FailureReason.FILES_NOT_FOUND)
        return succeed(candidates)


class MusicResolver(OrphanResolver):
    """Whole leaf folders that no longer contain audio."""

    def resolve(self, leaf_directories: Sequence[str]) -> Result[list[str], FailureReason]:
        candidates = [path for path in leaf_directories if not self.classify(path).main]

        if not candidates:
            return fail(FailureReason.SUBDIRECTORIES_BELOW_THRESHOLD_DO_NOT_EXIST)
        return succeed(candidates)


_RESOLVERS: dict[Mode, type[OrphanResolver]] = {
    Mode.MOVIES: MoviesResolver,
    Mode.TV: TvResolver,
    Mode.MUSIC: MusicResolver,
}


def get_resolver(profile: ModeProfile, filesystem: FileSystem) -> OrphanResolver:
    """Create the resolver matching the profile's mode."""
    return _RESOLVERS[profile.mode](profile, filesystem)
