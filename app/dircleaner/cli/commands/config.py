"""Settings commands.

Provides commands to show the effective mode profiles, write a settings
file documenting the built-in defaults, and locate the settings file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from dircleaner.core.paths import get_settings_path
from dircleaner.core.settings import (
    SettingsError,
    default_settings_document,
    load_settings,
    save_settings,
)
from dircleaner.engine.profiles import Mode
from dircleaner.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize settings.",
    invoke_without_command=True,
    no_args_is_help=True,
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Settings file to use instead of the default."),
]


@app.command()
def show(config: ConfigOption = None) -> None:
    """Show the effective profile for every mode."""
    try:
        settings = load_settings(config)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    table = Table(
        title="Mode Profiles",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Mode", style="bold", no_wrap=True)
    table.add_column("Threshold", justify="right", no_wrap=True)
    table.add_column("Removes")
    table.add_column("Extensions", style="muted")
    table.add_column("Never touched", style="muted")

    for mode in Mode:
        profile = settings.profile_for(mode)
        table.add_row(
            mode.value,
            str(profile.threshold),
            profile.target.value,
            " ".join(sorted(profile.extensions)) or "-",
            " ".join(f"{p}*" for p in profile.excluded_prefixes) or "-",
        )

    console.print(table)
    console.print(f"\n[dim]Run log file name: {settings.log_file_name}[/dim]")


@app.command()
def init(
    config: ConfigOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file documenting the built-in defaults."""
    target = config or get_settings_path()
    if target.exists() and not force:
        print_error(f"Settings file already exists: {target} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_settings(default_settings_document(), target)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {saved}")


@app.command()
def path() -> None:
    """Print the default settings file location."""
    settings_path = get_settings_path()
    console.print(str(settings_path), markup=False, highlight=False, soft_wrap=True)
    if not settings_path.exists():
        print_info("(not created yet, built-in defaults are in use)")
