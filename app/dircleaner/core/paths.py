"""XDG-compliant path management for dircleaner.

dircleaner keeps no state of its own. The only files it reads from the
user's home are the optional settings and theme overrides in the
configuration directory:

- Config: ~/.config/dircleaner/ (or XDG_CONFIG_HOME/dircleaner/)
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "dircleaner"

SETTINGS_FILE_NAME = "settings.toml"
THEME_FILE_NAME = "theme.toml"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/dircleaner/ (or XDG_CONFIG_HOME/dircleaner/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_settings_path() -> Path:
    """Get the path to the settings file.

    Returns:
        Path to ~/.config/dircleaner/settings.toml
    """
    return get_config_dir() / SETTINGS_FILE_NAME


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/dircleaner/theme.toml
    """
    return get_config_dir() / THEME_FILE_NAME
