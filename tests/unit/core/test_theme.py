"""Unit tests for console theme loading."""

# pyright: reportPrivateUsage=false

from pathlib import Path
from unittest.mock import patch

import pytest
from dircleaner.core.theme import STYLES, ThemeColors, _read_colors, get_rich_theme, load_theme
from pydantic import ValidationError


class TestThemeColors:
    """Tests for ThemeColors validation."""

    @pytest.mark.parametrize("color", ["#fff", "#0E8AC8", " #03b971 "])
    def test_accepts_hex_colors(self, color: str) -> None:
        """Short and long hex codes are accepted and trimmed."""
        assert ThemeColors(file=color).file == color.strip()

    @pytest.mark.parametrize("color", ["ffffff", "#ff", "#gggggg", "red"])
    def test_rejects_non_hex(self, color: str) -> None:
        """Anything but a hex code is rejected."""
        with pytest.raises(ValidationError, match="#RGB or #RRGGBB"):
            ThemeColors(file=color)

    def test_unknown_color_rejected(self) -> None:
        """Unknown palette entries are rejected."""
        with pytest.raises(ValidationError):
            ThemeColors(background="#000000")  # type: ignore[call-arg]


class TestReadColors:
    """Tests for _read_colors."""

    def test_reads_colors_table(self, tmp_path: Path) -> None:
        """String entries of the colors table are returned."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\nfile = "#000000"\nwidth = 3\n')

        assert _read_colors(theme_file) == {"file": "#000000"}

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file has no colors."""
        assert _read_colors(tmp_path / "theme.toml") == {}

    def test_malformed_file(self, tmp_path: Path) -> None:
        """Malformed TOML is ignored."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("colors = [")

        assert _read_colors(theme_file) == {}


class TestLoadTheme:
    """Tests for load_theme."""

    def test_bundled_palette(self) -> None:
        """Without user overrides the bundled palette is used."""
        assert load_theme() == ThemeColors()

    def test_user_override(self, tmp_path: Path) -> None:
        """User colors replace only the entries they name."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nremoved = "#ff5555"\n')

        with patch("dircleaner.core.theme.get_user_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors.removed == "#ff5555"
        assert colors.file == ThemeColors().file

    def test_invalid_override_falls_back(self, tmp_path: Path) -> None:
        """An invalid user color falls back to the defaults."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nremoved = "crimson"\n')

        with patch("dircleaner.core.theme.get_user_theme_path", return_value=user_theme):
            assert load_theme() == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme."""

    def test_defines_every_style(self) -> None:
        """Every style used by the console helpers is defined."""
        theme = get_rich_theme(ThemeColors())

        for name in STYLES:
            assert name in theme.styles
        assert theme.styles["directory"].bold is True
