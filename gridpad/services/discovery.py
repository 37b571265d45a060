"""
Application Discovery - Find installed applications on disk.

Looks one level deep in each configured directory for entries with a
known extension:
  - .desktop files (freedesktop entries, named from their Name= key)
  - .app bundles (macOS, named from the bundle file name)

Every scan creates new Application objects with fresh ids.
"""

import configparser
from pathlib import Path

from loguru import logger

from ..layout.items import Application

DESKTOP_SECTION = "Desktop Entry"


def _desktop_entry_name(path: Path):
    """
    Read the display name from a .desktop file.

    Returns:
        The Name= value, "" if the entry should not be shown,
        or None if the file could not be parsed
    """
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    try:
        parser.read(path, encoding="utf-8")
    except (configparser.Error, OSError, UnicodeDecodeError) as e:
        logger.warning(f"Skipping unreadable desktop entry {path}: {e}")
        return None

    if not parser.has_section(DESKTOP_SECTION):
        return None

    entry = parser[DESKTOP_SECTION]
    if entry.get("NoDisplay", "false").lower() == "true":
        return ""
    if entry.get("Hidden", "false").lower() == "true":
        return ""
    return entry.get("Name", "").strip() or path.stem


def _application_for(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".desktop":
        if not path.is_file():
            return None
        name = _desktop_entry_name(path)
        if not name:
            return None
        return Application(name=name, path=str(path))

    return Application(name=path.name[: -len(path.suffix)], path=str(path))


def scan_applications(directories, extensions=(".desktop", ".app")) -> list[Application]:
    """
    Scan directories for launchable applications.

    Args:
        directories: Paths to scan (``~`` is expanded); missing ones are skipped
        extensions: File suffixes to accept, case-insensitive

    Returns:
        Applications sorted by lowercased name
    """
    wanted = {ext.lower() for ext in extensions}
    found: list[Application] = []

    for directory in directories:
        root = Path(directory).expanduser()
        if not root.is_dir():
            logger.debug(f"Skipping missing application directory {root}")
            continue

        try:
            entries = sorted(root.iterdir(), key=lambda p: p.name.lower())
        except OSError:
            logger.exception(f"Failed to list {root}")
            continue

        for entry in entries:
            if entry.suffix.lower() not in wanted:
                continue
            app = _application_for(entry)
            if app:
                found.append(app)

    found.sort(key=lambda app: app.name.lower())
    logger.debug(f"Discovered {len(found)} applications in {len(directories)} directories")
    return found
