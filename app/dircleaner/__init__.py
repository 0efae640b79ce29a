"""dircleaner - Clean up orphaned media metadata left behind by library managers."""

__version__ = "0.3.0"
