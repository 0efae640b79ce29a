"""User settings overriding the built-in mode profiles.

Settings are stored in ~/.config/dircleaner/settings.toml. Every key is
optional; anything left out falls back to the built-in profile:

    log_file_name = "cleanLog.log"

    [tv]
    threshold = 200
    unit = "megabytes"
    extensions = [".mkv", ".mp4", ".ts"]

    [music]
    excluded_prefixes = ["cover"]
"""

import logging
import os
import tomllib
from dataclasses import replace
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from dircleaner.core.paths import get_settings_path
from dircleaner.core.size import Size, SizeUnit
from dircleaner.engine.profiles import Mode, ModeProfile, default_profile
from dircleaner.filesystem.runlog import LOG_FILE_NAME

logger = logging.getLogger(__name__)


class ModeSettings(BaseModel):
    """Overrides for a single mode profile.

    Attributes:
        threshold: Size threshold in ``unit``. None keeps the built-in value.
        unit: Unit of ``threshold``. Defaults to the built-in profile's unit.
        extensions: Extensions marking primary media, each starting with a dot.
        excluded_prefixes: File name prefixes that are never considered.
    """

    model_config = ConfigDict(extra="forbid")

    threshold: Annotated[
        int | None,
        Field(ge=0, description="Size threshold (None = built-in)"),
    ] = None
    unit: Annotated[
        SizeUnit | None,
        Field(description="Unit of threshold (None = built-in unit)"),
    ] = None
    extensions: Annotated[
        list[str] | None,
        Field(description="Primary media extensions (None = built-in)"),
    ] = None
    excluded_prefixes: Annotated[
        list[str] | None,
        Field(description="Never-considered file name prefixes (None = built-in)"),
    ] = None

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: list[str] | None) -> list[str] | None:
        """Ensure every extension starts with a dot."""
        if v is None:
            return v
        for ext in v:
            if not ext.startswith(".") or len(ext) < 2:
                msg = f"extension must start with '.', got '{ext}'"
                raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def validate_unit_has_threshold(self) -> "ModeSettings":
        """A unit on its own would silently reinterpret the built-in threshold."""
        if self.unit is not None and self.threshold is None:
            msg = "unit requires threshold to be set"
            raise ValueError(msg)
        return self

    def apply(self, profile: ModeProfile) -> ModeProfile:
        """Return ``profile`` with these overrides applied."""
        changes: dict[str, object] = {}
        if self.threshold is not None:
            changes["threshold"] = Size(self.threshold, self.unit or profile.threshold.unit)
        if self.extensions is not None:
            changes["extensions"] = frozenset(self.extensions)
        if self.excluded_prefixes is not None:
            changes["excluded_prefixes"] = tuple(self.excluded_prefixes)
        return replace(profile, **changes)  # type: ignore[arg-type]


class Settings(BaseModel):
    """dircleaner settings.

    Attributes:
        log_file_name: Name of the run log written into the scanned root.
        movies: Overrides for the movies profile.
        tv: Overrides for the TV profile.
        music: Overrides for the music profile.
    """

    model_config = ConfigDict(extra="forbid")

    log_file_name: Annotated[
        str,
        Field(min_length=1, description="Run log file name inside the scanned root"),
    ] = LOG_FILE_NAME
    movies: ModeSettings = Field(default_factory=ModeSettings)
    tv: ModeSettings = Field(default_factory=ModeSettings)
    music: ModeSettings = Field(default_factory=ModeSettings)

    @field_validator("log_file_name")
    @classmethod
    def validate_log_file_name(cls, v: str) -> str:
        """The run log must live directly inside the scanned root."""
        if "/" in v or "\\" in v or v in (".", ".."):
            msg = f"log_file_name must be a plain file name, got '{v}'"
            raise ValueError(msg)
        return v

    def profile_for(self, mode: Mode) -> ModeProfile:
        """Build the effective profile for a mode.

        Args:
            mode: Mode to build the profile for.

        Returns:
            Built-in profile with this mode's overrides applied.
        """
        overrides: ModeSettings = getattr(self, mode.value)
        return overrides.apply(default_profile(mode))


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsNotFoundError(SettingsError):
    """Raised when an explicitly requested settings file is not found."""


class SettingsParseError(SettingsError):
    """Raised when a settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    A missing default settings file yields the built-in defaults. A missing
    file that was requested explicitly is an error.

    Args:
        path: Path to the settings file. If None, uses the default settings path.

    Returns:
        Validated Settings object.

    Raises:
        SettingsNotFoundError: If an explicit ``path`` doesn't exist.
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        if path is not None:
            raise SettingsNotFoundError(f"Settings file not found: {settings_path}")
        logger.debug("No settings file at %s, using defaults", settings_path)
        return Settings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        settings: The Settings object to save.
        path: Path to save the settings. If None, uses the default settings path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    data = settings.model_dump(mode="json", exclude_none=True)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path


def default_settings_document() -> Settings:
    """Settings spelling out every built-in profile value.

    Used by ``config init`` so the written file documents the defaults.
    """
    sections: dict[str, ModeSettings] = {}
    for mode in Mode:
        profile = default_profile(mode)
        sections[mode.value] = ModeSettings(
            threshold=profile.threshold.value,
            unit=profile.threshold.unit,
            extensions=sorted(profile.extensions),
            excluded_prefixes=list(profile.excluded_prefixes),
        )
    return Settings(**sections)  # type: ignore[arg-type]
