"""
Helper utilities for the Gridpad launcher.

Provides:
- Settings loading (TOML merged over defaults)
- XDG config/data locations
- Grid column count from available width
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict

import toml
from loguru import logger

DEFAULT_SETTINGS = {
    "grid": {
        "item_width": 120,
    },
    "discovery": {
        "directories": [
            "/usr/share/applications",
            "~/.local/share/applications",
            "/Applications",
            "/System/Applications",
            "~/Applications",
        ],
        "extensions": [".desktop", ".app"],
    },
    "layout": {
        "path": "",
    },
}


def _config_dir() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "gridpad"


def _data_dir() -> Path:
    base = os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share"
    return Path(base) / "gridpad"


def _settings_path() -> Path:
    return _config_dir() / "settings.toml"


def layout_path(settings: Dict[str, Any]) -> Path:
    """Where the layout is saved: [layout] path, or the XDG data dir."""
    configured = settings.get("layout", {}).get("path", "")
    if configured:
        return Path(configured).expanduser()
    return _data_dir() / "layout.json"


def load_settings() -> Dict[str, Any]:
    """
    Load launcher settings from TOML file.

    Returns:
        Dictionary containing settings with defaults applied

    Example settings structure:
        [grid]
        item_width = 120

        [discovery]
        directories = ["/usr/share/applications"]
        extensions = [".desktop"]
    """
    settings_path = _settings_path()

    if not settings_path.exists():
        logger.debug(f"Settings file not found at {settings_path}, using defaults")
        return copy.deepcopy(DEFAULT_SETTINGS)

    try:
        loaded = toml.load(settings_path)
    except (OSError, toml.TomlDecodeError):
        logger.exception(f"Could not load settings from {settings_path}, using defaults")
        return copy.deepcopy(DEFAULT_SETTINGS)

    return _deep_merge(DEFAULT_SETTINGS, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = copy.deepcopy(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def column_count(width: float, item_width: float = 120) -> int:
    """Number of grid columns that fit in width, at least one."""
    if item_width <= 0:
        return 1
    return max(int(width // item_width), 1)
