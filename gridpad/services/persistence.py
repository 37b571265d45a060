"""
Layout Persistence - Read and write the grid layout as JSON.

Writes go to a temporary file first and are moved into place, so a
crash mid-write never leaves a truncated layout behind.

Failures are logged and reported through return values; nothing here
raises to the caller.
"""

import json
import os
from pathlib import Path
from typing import Optional

from loguru import logger

from ..layout.codec import LayoutDecodeError, decode_layout, encode_layout
from ..layout.items import LayoutItem


class LayoutPersistence:
    """
    File-backed storage for the ordered list of LayoutItems.

    Methods:
        save(items): Write the full layout, returns True on success
        load(): Read the layout, returns None when absent or unreadable
        delete(): Remove the persisted layout
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def save(self, items) -> bool:
        """
        Write the full layout.

        Args:
            items: Ordered sequence of LayoutItems

        Returns:
            True if the file was written, False on I/O failure
        """
        data = encode_layout(items)
        tmp_path = self.path.with_suffix(".tmp")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError:
            logger.exception(f"Failed to save layout to {self.path}")
            if tmp_path.exists():
                tmp_path.unlink()
            return False

        logger.debug(f"Saved {len(data)} layout items to {self.path}")
        return True

    def load(self) -> Optional[list[LayoutItem]]:
        """
        Read the persisted layout.

        Returns:
            List of LayoutItems, or None if the file is missing,
            unreadable, not JSON, or not a valid layout
        """
        if not self.path.exists():
            logger.debug(f"No saved layout at {self.path}")
            return None

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError):
            logger.exception(f"Failed to read layout from {self.path}")
            return None

        try:
            return decode_layout(data)
        except LayoutDecodeError as e:
            logger.warning(f"Ignoring invalid layout in {self.path}: {e}")
            return None

    def delete(self) -> bool:
        """Remove the persisted layout. Returns False only on I/O failure."""
        try:
            self.path.unlink(missing_ok=True)
        except OSError:
            logger.exception(f"Failed to delete layout at {self.path}")
            return False
        return True
