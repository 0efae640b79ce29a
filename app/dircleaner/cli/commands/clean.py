"""Cleanup commands for the tv, movies and music library layouts.

Each command runs the cleanup pipeline for one mode:

    dircleaner tv -path "/media/TV Shows" --preview
    dircleaner movies -path /media/Movies
    dircleaner music -path /media/Music --keep-going
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from dircleaner.core.failures import failure_message
from dircleaner.core.result import Success
from dircleaner.core.settings import SettingsError, load_settings
from dircleaner.engine.orchestrator import CleanReport, run_clean
from dircleaner.engine.profiles import Mode
from dircleaner.filesystem.local import LocalFileSystem
from dircleaner.filesystem.models import PathType
from dircleaner.filesystem.operator import DeletionAbortedError, DeletionOperator
from dircleaner.utils.formatting import (
    console,
    print_error,
    print_info,
    print_path,
    print_success,
    print_warning,
)

logger = logging.getLogger(__name__)

PathOption = Annotated[
    str | None,
    typer.Option("--path", "-path", help="Library root directory to clean."),
]
PreviewOption = Annotated[
    bool,
    typer.Option("--preview", help="Only list what would be deleted."),
]
KeepGoingOption = Annotated[
    bool,
    typer.Option("--keep-going", help="Continue deleting after a failed deletion."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Settings file to use instead of the default."),
]


def tv(
    ctx: typer.Context,
    path: PathOption = None,
    preview: PreviewOption = False,
    keep_going: KeepGoingOption = False,
    config: ConfigOption = None,
) -> None:
    """Delete artwork, subtitles and metadata left behind by removed episodes."""
    _run_mode(ctx, Mode.TV, path, preview, keep_going, config)


def movies(
    ctx: typer.Context,
    path: PathOption = None,
    preview: PreviewOption = False,
    keep_going: KeepGoingOption = False,
    config: ConfigOption = None,
) -> None:
    """Delete movie folders whose movie file has been removed."""
    _run_mode(ctx, Mode.MOVIES, path, preview, keep_going, config)


def music(
    ctx: typer.Context,
    path: PathOption = None,
    preview: PreviewOption = False,
    keep_going: KeepGoingOption = False,
    config: ConfigOption = None,
) -> None:
    """Delete album folders that no longer contain any audio."""
    _run_mode(ctx, Mode.MUSIC, path, preview, keep_going, config)


# === Private helper functions ===


def _run_mode(
    ctx: typer.Context,
    mode: Mode,
    path: str | None,
    preview: bool,
    keep_going: bool,
    config: Path | None,
) -> None:
    """Run the cleanup pipeline for ``mode`` and report the outcome."""
    if path is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)

    try:
        settings = load_settings(config)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    profile = settings.profile_for(mode)
    filesystem = LocalFileSystem()
    operator = DeletionOperator(filesystem, keep_going=keep_going)

    try:
        outcome = run_clean(
            path,
            profile,
            preview=preview,
            filesystem=filesystem,
            operator=operator,
            log_file_name=settings.log_file_name,
        )
    except DeletionAbortedError as e:
        deleted = sum(1 for r in e.results if r.success)
        print_error(str(e))
        print_info(f"{deleted} item(s) deleted before aborting.")
        raise typer.Exit(code=1) from e
    except OSError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    outcome.map_messages(failure_message).failure_tee(_raise_visible_error)
    outcome.success_tee(lambda report, messages: _print_report(ctx, report, messages))

    # Items that vanished before deletion do not fail the run
    if isinstance(outcome, Success) and any(not r.missing for r in outcome.value.failed):
        raise typer.Exit(code=1)


def _raise_visible_error(message: str) -> None:
    """Surface structural failures; "nothing to clean" outcomes stay silent."""
    if message:
        print_error(message)
        raise typer.Exit(code=1)
    logger.info("Nothing to clean")


def _print_report(ctx: typer.Context, report: CleanReport, messages: tuple[str, ...]) -> None:
    """Display the candidates of a preview or the results of a deletion run."""
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    if verbose:
        for message in messages:
            console.print(f"[dim]{message}[/dim]")

    style = "directory" if report.target == PathType.DIRECTORY else "file"

    if report.preview:
        print_info(f"Preview: {len(report.candidates)} item(s) would be deleted")
        for candidate in report.candidates:
            print_path(candidate, style=style)
        return

    for path in report.deleted:
        print_path(path, style="removed")

    missing = [r for r in report.failed if r.missing]
    errors = [r for r in report.failed if not r.missing]

    if missing:
        print_warning(f"{len(missing)} item(s) had already been removed")
    for result in errors:
        print_warning(f"Could not delete {result.path}: {result.error}")

    print_success(f"Deleted {len(report.deleted)} item(s). Logged to {report.log_file}")
