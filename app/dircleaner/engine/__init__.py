"""Directory classification and orphan-resolution engine.

This module provides leaf directory detection, per-mode orphan
resolvers, mode profiles, and the run orchestrator composing them.
"""

from dircleaner.engine.classifier import DirectoryClassifier
from dircleaner.engine.orchestrator import CleanReport, run_clean
from dircleaner.engine.profiles import DEFAULT_PROFILES, Mode, ModeProfile, default_profile
from dircleaner.engine.resolver import (
    Classification,
    MoviesResolver,
    MusicResolver,
    OrphanResolver,
    TvResolver,
    get_resolver,
)

__all__ = [
    "DEFAULT_PROFILES",
    "Classification",
    "CleanReport",
    "DirectoryClassifier",
    "Mode",
    "ModeProfile",
    "MoviesResolver",
    "MusicResolver",
    "OrphanResolver",
    "TvResolver",
    "default_profile",
    "get_resolver",
    "run_clean",
]
