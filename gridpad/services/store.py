"""
Layout Store - The ordered list of grid items and every mutation on it.

The store is the single owner of the layout. Mutations are committed by
assigning a complete new list, then persisted, then announced through
the "changed" signal.

Operations addressed to an id that does not exist are silent no-ops:
they return False, write nothing and emit nothing.
"""

from typing import Callable, Optional

from gi.repository import GObject
from loguru import logger

from ..layout.items import Application, Folder, LayoutItem, as_folder
from .persistence import LayoutPersistence


class LayoutStore(GObject.Object):
    """
    Owner of the launcher layout.

    Signals:
        changed: Emitted after every committed mutation, hydrate and reset

    Methods:
        hydrate(): Load the saved layout, or seed it from a scan
        reset_layout(): Forget the saved layout and reseed from a scan
        replace(item_id, new_item): Swap an item in place
        rename_folder(folder_id, name): Rename a folder
        append_to_folder(folder_id, app): Add an app to a folder
        remove_app_from_folder(app, folder_id): Pull an app out to index 0
        commit(items): Replace the whole layout at once
    """

    __gtype_name__ = "GridpadLayoutStore"

    __gsignals__ = {
        "changed": (GObject.SignalFlags.RUN_FIRST, None, ()),
    }

    def __init__(self, persistence: LayoutPersistence, scanner: Callable[[], list[Application]]):
        """
        Args:
            persistence: Where the layout is saved and loaded
            scanner: Returns freshly discovered applications
        """
        super().__init__()
        self.persistence = persistence
        self.scanner = scanner
        self._items: list[LayoutItem] = []

    # Read access

    @property
    def items(self) -> tuple[LayoutItem, ...]:
        """Snapshot of the current layout."""
        return tuple(self._items)

    def __len__(self):
        return len(self._items)

    def index_of(self, item_id: str) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None

    def find(self, item_id: str) -> Optional[LayoutItem]:
        index = self.index_of(item_id)
        return None if index is None else self._items[index]

    def folder(self, folder_id: str) -> Optional[Folder]:
        item = self.find(folder_id)
        return None if item is None else as_folder(item)

    # Lifecycle

    def hydrate(self) -> None:
        """
        Populate the layout at startup.

        A saved, non-empty layout wins. Otherwise installed applications
        are scanned and the result is saved.
        """
        saved = self.persistence.load()
        if saved:
            self._items = list(saved)
            logger.debug(f"Hydrated layout with {len(saved)} saved items")
            self.emit("changed")
            return

        self._seed_from_scan()

    def reset_layout(self) -> None:
        """Delete the saved layout, rescan, and save the fresh layout."""
        self.persistence.delete()
        self._seed_from_scan()

    def _seed_from_scan(self) -> None:
        apps = self.scanner()
        logger.debug(f"Seeding layout from {len(apps)} discovered applications")
        self.commit([LayoutItem.of(app) for app in apps])

    # Mutations

    def commit(self, items) -> None:
        """
        Replace the whole layout in one assignment, save it and notify.

        Raises:
            ValueError: If two top-level items share an id
        """
        items = list(items)
        if not _has_unique_ids(items):
            raise ValueError("Layout items must have unique ids")

        self._items = items
        self._save()
        self.emit("changed")

    def _save(self) -> None:
        # Write failures keep the in-memory layout authoritative
        if not self.persistence.save(self._items):
            logger.warning("Layout kept in memory only; will retry on next change")

    def replace(self, item_id: str, new_item: LayoutItem) -> bool:
        """Replace the item with item_id by new_item, keeping its position."""
        index = self.index_of(item_id)
        if index is None:
            return False

        items = list(self._items)
        items[index] = new_item
        if not _has_unique_ids(items):
            logger.warning(f"Not replacing {item_id}: id {new_item.id} is already in the layout")
            return False

        self.commit(items)
        return True

    def rename_folder(self, folder_id: str, new_name: str) -> bool:
        folder = self.folder(folder_id)
        if folder is None:
            return False
        return self.replace(folder_id, LayoutItem.of(folder.renamed(new_name)))

    def append_to_folder(self, folder_id: str, app: Application) -> bool:
        folder = self.folder(folder_id)
        if folder is None or folder.contains(app.id):
            return False
        return self.replace(folder_id, LayoutItem.of(folder.with_app(app)))

    def remove_app_from_folder(self, app: Application, folder_id: str) -> bool:
        """
        Take app out of a folder and put it first in the layout.

        A folder left with one app becomes that bare app in the same
        position; a folder left empty is removed. The app is inserted at
        index 0 whether or not it was in the folder; if it already sits at
        the top level it is moved rather than duplicated.
        """
        folder_index = self.index_of(folder_id)
        folder = None if folder_index is None else as_folder(self._items[folder_index])
        if folder is None:
            return False

        items = list(self._items)
        remaining = folder.without_app(app.id)

        if len(remaining.apps) == 1:
            items[folder_index] = LayoutItem.of(remaining.apps[0])
            logger.debug(f"Collapsed folder '{folder.name}' into {remaining.apps[0].name}")
        elif not remaining.apps:
            del items[folder_index]
            logger.debug(f"Removed empty folder '{folder.name}'")
        else:
            items[folder_index] = LayoutItem.of(remaining)

        items = [item for item in items if item.id != app.id]
        items.insert(0, LayoutItem.of(app))
        if not _has_unique_ids(items):
            logger.warning(f"Not extracting {app.name}: folder '{folder.name}' would leave duplicate ids")
            return False

        self.commit(items)
        return True


def _has_unique_ids(items) -> bool:
    ids = [item.id for item in items]
    return len(ids) == len(set(ids))
