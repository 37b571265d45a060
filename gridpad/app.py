"""
Gridpad Launcher - Application wiring.

Builds one LayoutStore and hands it to the engines and panels that work
on it. A toolkit front end calls create_app(), then forwards resize,
key and drag-and-drop events to app.grid.

Usage:
  app = create_app()
  app.grid.set_width(window_width)
  app.grid.on_key_press("Right")
"""

from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional

from loguru import logger

from .layout.merge import MergeEngine
from .navigation.navigator import Navigator
from .panels.grid import GridPanel
from .services.discovery import scan_applications
from .services.opener import open_path
from .services.persistence import LayoutPersistence
from .services.store import LayoutStore
from .utils.helpers import layout_path, load_settings


@dataclass
class GridpadApp:
    """Everything a front end needs, sharing a single store."""
    settings: dict
    store: LayoutStore
    navigator: Navigator
    merge_engine: MergeEngine
    grid: GridPanel


def create_app(settings: Optional[dict] = None,
               opener: Callable[[str], object] = open_path,
               hydrate: bool = True) -> GridpadApp:
    """
    Build and hydrate the launcher.

    Args:
        settings: Settings dictionary; loaded from settings.toml when None
        opener: Launches an application path
        hydrate: Load or discover the layout immediately
    """
    if settings is None:
        settings = load_settings()

    discovery = settings["discovery"]
    scanner = partial(
        scan_applications,
        discovery["directories"],
        discovery["extensions"],
    )

    store = LayoutStore(LayoutPersistence(layout_path(settings)), scanner)
    navigator = Navigator(store)
    merge_engine = MergeEngine(store)
    grid = GridPanel(
        store,
        navigator,
        merge_engine,
        opener,
        item_width=settings["grid"]["item_width"],
    )

    if hydrate:
        store.hydrate()
        logger.debug(f"Gridpad initialized with {len(store)} items")

    return GridpadApp(settings, store, navigator, merge_engine, grid)
