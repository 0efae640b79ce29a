"""Rich console output helpers.

Status messages go through theme styles; filesystem paths are always
printed verbatim on one line so they can be copied or piped.
"""

import sys

from rich.console import Console
from rich.markup import escape

from dircleaner.core.theme import get_theme


def _make_console(stderr: bool = False) -> Console:
    stream = sys.stderr if stderr else sys.stdout
    # Full hex colors on a real terminal, auto-detection otherwise
    color_system = "truecolor" if stream.isatty() else "auto"
    return Console(theme=get_theme(), stderr=stderr, color_system=color_system)


console = _make_console()
err_console = _make_console(stderr=True)


def _print_status(target: Console, style: str, message: str, label: str = "") -> None:
    if label:
        target.print(f"[{style}]{label}:[/] {escape(message)}")
    else:
        target.print(f"[{style}]{escape(message)}[/]")


def print_path(path: str, style: str | None = None) -> None:
    """Print a filesystem path on a single line without markup interpretation."""
    console.print(path, style=style, markup=False, highlight=False, soft_wrap=True)


def print_info(message: str) -> None:
    _print_status(console, "info", message)


def print_success(message: str) -> None:
    _print_status(console, "success", message)


def print_warning(message: str) -> None:
    _print_status(err_console, "warning", message, label="Warning")


def print_error(message: str) -> None:
    _print_status(err_console, "error", message, label="Error")
