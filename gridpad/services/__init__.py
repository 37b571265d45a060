# Gridpad Services Package
"""
Backend services for the Gridpad launcher.

Services handle layout state, data persistence, and system integration.
"""

from .discovery import scan_applications
from .opener import open_path
from .persistence import LayoutPersistence
from .store import LayoutStore

__all__ = ["LayoutStore", "LayoutPersistence", "scan_applications", "open_path"]
