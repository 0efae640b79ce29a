"""Console colors for dircleaner output.

The bundled palette lives in ``data/theme.toml``. Users can override any
subset of its colors in ``~/.config/dircleaner/theme.toml``:

    [colors]
    removed = "#ff5555"
"""

import logging
import re
import tomllib
from functools import lru_cache
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from dircleaner.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Palette used by the console helpers, as #RGB or #RRGGBB hex codes."""

    model_config = ConfigDict(extra="forbid")

    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    # Candidate paths
    directory: str = "#0e8ac8"
    file: str = "#c1ff62"
    removed: str = "#f53263"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object) -> str:
        if not isinstance(v, str) or not HEX_COLOR.fullmatch(v.strip()):
            msg = f"expected a #RGB or #RRGGBB color, got {v!r}"
            raise ValueError(msg)
        return v.strip()


# Rich style name -> (palette color, extra attributes)
STYLES: dict[str, tuple[str, str]] = {
    "muted": ("muted", ""),
    "dim": ("muted", ""),
    "border": ("border", ""),
    "bold_header": ("header", "bold"),
    "success": ("success", ""),
    "warning": ("warning", ""),
    "error": ("error", "bold"),
    "info": ("info", ""),
    "directory": ("directory", "bold"),
    "file": ("file", ""),
    "removed": ("removed", ""),
}


def _read_colors(path: Path) -> dict[str, str]:
    """Read the ``[colors]`` table of a theme file.

    Missing files yield an empty table. Unreadable or malformed files are
    logged and also yield an empty table.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: 'colors' is not a table", path)
        return {}
    return {key: value for key, value in colors.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Merge the user's color overrides over the bundled palette.

    An invalid merged palette falls back to the built-in defaults.
    """
    bundled = resources.files("dircleaner.data").joinpath("theme.toml")
    colors = _read_colors(Path(str(bundled)))
    colors.update(_read_colors(get_user_theme_path()))

    try:
        return ThemeColors(**colors)
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors) -> Theme:
    """Build the Rich theme for a palette."""
    styles: dict[str, str] = {}
    for name, (field, attributes) in STYLES.items():
        color = getattr(colors, field)
        styles[name] = f"{attributes} {color}".strip()
    return Theme(styles)


@lru_cache(maxsize=1)
def get_theme() -> Theme:
    """Rich theme for the effective palette, loaded once per process."""
    return get_rich_theme(load_theme())
