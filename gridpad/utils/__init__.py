# Gridpad Utilities Package
"""
Shared utility functions and helpers for the Gridpad launcher.
"""

from .helpers import column_count, layout_path, load_settings

__all__ = ["column_count", "layout_path", "load_settings"]
