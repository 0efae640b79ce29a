"""CLI package for dircleaner.

This package contains the Typer application and all subcommands.
"""

from dircleaner.cli.main import app

__all__ = ["app"]
