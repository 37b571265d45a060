# Gridpad Panels Package
"""
Toolkit-independent controllers for the launcher views.

Panels:
  - Grid: main icon grid with search, selection and drag-and-drop
  - Folder: the open view of one folder
"""

from .folder import FolderPanel
from .grid import GridPanel

__all__ = ["GridPanel", "FolderPanel"]
