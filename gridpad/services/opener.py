"""
Application opener - Start an application by filesystem path.

Uses the platform's opener:
  - macOS: open
  - Windows: os.startfile
  - Linux/BSD: gio launch for .desktop entries, xdg-open otherwise
"""

import os
import subprocess
import sys

from loguru import logger


def _command_for(path: str) -> list[str]:
    if sys.platform == "darwin":
        return ["open", path]
    if path.endswith(".desktop"):
        return ["gio", "launch", path]
    return ["xdg-open", path]


def open_path(path: str) -> bool:
    """
    Launch the application at path without waiting for it.

    Returns:
        True if the launch was handed off, False if it failed
    """
    try:
        if sys.platform.startswith("win"):
            os.startfile(path)  # type: ignore[attr-defined]
        else:
            subprocess.Popen(
                _command_for(path),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
    except OSError:
        logger.exception(f"Failed to open {path}")
        return False

    logger.debug(f"Opened {path}")
    return True
