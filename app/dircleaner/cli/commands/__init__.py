"""CLI commands for dircleaner.

This package contains all subcommand implementations.
"""

from dircleaner.cli.commands import clean, config

__all__ = ["clean", "config"]
