"""Name normalization for matching extra files to their main file.

An extra file such as ``Show.S01E01.en.srt`` or ``Show.S01E01-thumb.jpg``
belongs to ``Show.S01E01.mkv``. Normalization reduces the extra file's stem
to the part expected to appear in the main file's name by applying each
step exactly once, in order. Steps are not repeated after one succeeds, so
``Episode.en-thumb`` only loses ``-thumb``.
"""

import re
from collections.abc import Callable, Iterable

NameTransform = Callable[[str], str]

LOCALE_SUFFIX = ".en"
THUMBNAIL_SUFFIX = "-thumb"

# Whitespace, then a parenthesized tag at the end; the closing paren is optional
RELEASE_TAG_PATTERN = re.compile(r"\s\([\w.\-\s,]+\)?$")


def _strip_suffix(name: str, suffix: str) -> str:
    if name.endswith(suffix):
        return name[: -len(suffix)]
    return name


def strip_locale_suffix(name: str) -> str:
    """Remove a trailing ``.en`` subtitle locale suffix."""
    return _strip_suffix(name, LOCALE_SUFFIX)


def strip_thumbnail_suffix(name: str) -> str:
    """Remove a trailing ``-thumb`` thumbnail suffix."""
    return _strip_suffix(name, THUMBNAIL_SUFFIX)


def strip_release_tag(name: str) -> str:
    """Remove a trailing `` (tag)`` such as a year or release group."""
    return RELEASE_TAG_PATTERN.sub("", name, count=1)


NORMALIZATION_STEPS: tuple[NameTransform, ...] = (
    strip_locale_suffix,
    strip_thumbnail_suffix,
    strip_release_tag,
)


def normalize_name(stem: str, steps: Iterable[NameTransform] = NORMALIZATION_STEPS) -> str:
    """Apply each normalization step once, in order.

    Args:
        stem: File name without extension.
        steps: Ordered transforms to apply.

    Returns:
        Normalized base name.
    """
    for step in steps:
        stem = step(stem)
    return stem
