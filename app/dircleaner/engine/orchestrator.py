"""Run orchestration: compose classification and resolution into one pipeline.

A run validates the root, expands it into leaf directories, resolves the
deletion candidates for the profile's mode and, unless previewing, records
the candidates in the run log and deletes them. Logging and deletion are
attached as success-path observers, so they never run when any earlier
stage has failed.
"""

import logging
import os
from dataclasses import dataclass, replace

from dircleaner.core.failures import FailureReason
from dircleaner.core.result import Result, succeed
from dircleaner.engine.classifier import DirectoryClassifier
from dircleaner.engine.profiles import Mode, ModeProfile
from dircleaner.engine.resolver import get_resolver
from dircleaner.filesystem.local import LocalFileSystem
from dircleaner.filesystem.models import FileSystem, PathType
from dircleaner.filesystem.operator import DeletionOperator, DeletionResult
from dircleaner.filesystem.runlog import LOG_FILE_NAME, LOG_HEADER, RunLogger

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CleanReport:
    """Outcome of a successful cleanup run.

    Attributes:
        mode: Mode the run used.
        root: Scanned root directory.
        target: Kind of path the candidates are.
        candidates: Paths selected for deletion, in discovery order.
        preview: Whether the run was a preview (nothing logged or deleted).
        results: Deletion results; empty for previews.
        log_file: Run log the candidates were written to, None for previews.
    """

    mode: Mode
    root: str
    target: PathType
    candidates: tuple[str, ...]
    preview: bool
    results: tuple[DeletionResult, ...] = ()
    log_file: str | None = None

    @property
    def deleted(self) -> list[str]:
        return [r.path for r in self.results if r.success]

    @property
    def failed(self) -> list[DeletionResult]:
        return [r for r in self.results if not r.success]


def run_clean(
    root: str | None,
    profile: ModeProfile,
    *,
    preview: bool = False,
    filesystem: FileSystem | None = None,
    operator: DeletionOperator | None = None,
    run_logger: RunLogger | None = None,
    log_file_name: str = LOG_FILE_NAME,
) -> Result[CleanReport, FailureReason]:
    """Run one cleanup pipeline for a root directory.

    Args:
        root: Directory to clean.
        profile: Profile selecting thresholds and heuristics.
        preview: If True, only compute candidates.
        filesystem: Filesystem collaborator. Defaults to LocalFileSystem.
        operator: Deletion operator. Defaults to an aborting operator on ``filesystem``.
        run_logger: Run log writer. Defaults to RunLogger().
        log_file_name: Name of the run log inside ``root``.

    Returns:
        Success with a CleanReport, or the first failure of the pipeline.

    Raises:
        DeletionAbortedError: If a deletion fails and the operator does not keep going.
        OSError: If the run log cannot be written.
    """
    filesystem = filesystem or LocalFileSystem()
    operator = operator or DeletionOperator(filesystem)
    run_logger = run_logger or RunLogger()

    classifier = DirectoryClassifier(filesystem)
    resolver = get_resolver(profile, filesystem)

    logger.info("Scanning %s for %s orphans", root, profile.mode.value)

    outcome = (
        classifier.path_exists(root)
        .bind(lambda path: classifier.list_directories(path, recursive=True))
        .bind(classifier.filter_leaf_directories)
        .bind(resolver.resolve)
        .bind(lambda paths: succeed(paths, f"{len(paths)} candidate(s) found"))
        .map(
            lambda paths: CleanReport(
                mode=profile.mode,
                root=root or "",
                target=profile.target,
                candidates=tuple(paths),
                preview=preview,
            )
        )
    )

    if preview:
        return outcome

    log_file = os.path.join(root or "", log_file_name)
    results: list[DeletionResult] = []

    def write_log(report: CleanReport, _: tuple[str, ...]) -> None:
        run_logger.append_run(log_file, LOG_HEADER, report.candidates)

    def delete_candidates(report: CleanReport, _: tuple[str, ...]) -> None:
        results.extend(operator.delete(report.candidates, profile.target))

    return (
        outcome.success_tee(write_log)
        .success_tee(delete_candidates)
        .map(lambda report: replace(report, results=tuple(results), log_file=log_file))
    )
