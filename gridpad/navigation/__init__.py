"""
Navigation package - Search filtering and keyboard selection.
"""

from .filter import filter_items
from .navigator import Direction, Navigator, next_index

__all__ = ["Direction", "Navigator", "filter_items", "next_index"]
