# Gridpad Launcher Package
"""
Grid application launcher with folders, drag-and-drop merging,
keyboard navigation and live search.

Modules:
  - layout: Items, persistence codec, merge/extract engine
  - navigation: Search filtering and selection movement
  - services: Layout store, persistence, discovery, opener
  - panels: Toolkit-independent grid and folder controllers
"""

__version__ = "0.1.0.dev0"
