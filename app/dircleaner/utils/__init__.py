"""Utility modules for dircleaner.

This module exports commonly used utility functions.
"""

from dircleaner.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_path,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_path",
    "print_success",
    "print_warning",
]
