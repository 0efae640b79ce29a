"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from dircleaner import __version__
from dircleaner.cli.commands import clean, config
from dircleaner.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="dircleaner",
    help="Remove artwork, subtitles and folders orphaned by deleted media.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dircleaner version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route dircleaner log records to stderr through Rich."""
    package_logger = logging.getLogger("dircleaner")
    package_logger.handlers = [RichHandler(console=err_console, show_path=False)]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
) -> None:
    """dircleaner - Clean up after your media library manager.

    Finds leftover artwork, subtitles, thumbnails and near-empty folders
    whose movie, episode or album files have been removed, and deletes them.
    Use --preview on any mode to see what would be removed.
    """
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


# Register commands
app.command(name="tv")(clean.tv)
app.command(name="movies")(clean.movies)
app.command(name="music")(clean.music)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
