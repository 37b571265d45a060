"""
Navigator - Keyboard selection over the filtered grid.

Index arithmetic:
  horizontal (left/right, step 1)        wraps:  (current + offset + N) % N
  vertical   (up/down, step = columns)   clamps: to [0, N-1], never wraps

The selection is an index into the filtered view, not the layout, so it
is re-validated whenever the search text or the layout changes.
"""

from enum import Enum
from typing import Callable, Optional

from gi.repository import GObject
from loguru import logger

from ..layout.items import LayoutItem, as_application, as_folder
from .filter import filter_items


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    def offset(self, columns: int) -> int:
        """Step in view order for this direction on a grid with columns."""
        step = 1 if self.is_horizontal else max(columns, 1)
        return -step if self in (Direction.LEFT, Direction.UP) else step


def next_index(current: int, offset: int, count: int, wrap: bool) -> Optional[int]:
    """
    Compute the index reached by stepping offset from current.

    Args:
        current: Starting index in [0, count)
        offset: Signed step in view order
        count: Size of the filtered view
        wrap: True for horizontal wraparound, False for vertical clamping

    Returns:
        The new index, or None for an empty view
    """
    if count <= 0:
        return None

    raw = current + offset
    if wrap:
        return (raw + count) % count

    # Stepping from one end never lands on the opposite end
    if current == 0 and raw == count - 1:
        return 0
    if current == count - 1 and raw == 0:
        return count - 1
    return max(0, min(raw, count - 1))


class Navigator(GObject.Object):
    """
    Owner of the search text and the selected index.

    Signals:
        selection-changed: Emitted with the new index (or None)
        search-changed: Emitted with the new search text

    Args:
        store: LayoutStore providing the layout; the navigator clamps the
            selection whenever the store reports a change
    """

    __gtype_name__ = "GridpadNavigator"

    # Index is passed as a Python object so None can mean "no selection"
    __gsignals__ = {
        "selection-changed": (GObject.SignalFlags.RUN_FIRST, None, (object,)),
        "search-changed": (GObject.SignalFlags.RUN_FIRST, None, (str,)),
    }

    def __init__(self, store):
        super().__init__()
        self.store = store
        self._search_text = ""
        self._selected_index: Optional[int] = None
        self._store_handler = store.connect("changed", lambda _store: self._on_layout_changed())

    # Read access

    @property
    def search_text(self) -> str:
        return self._search_text

    @property
    def selected_index(self) -> Optional[int]:
        """Selected index, validated against the current filtered view."""
        index = self._selected_index
        if index is None or not 0 <= index < len(self.filtered_items()):
            return None
        return index

    def filtered_items(self) -> list[LayoutItem]:
        return filter_items(self.store.items, self._search_text)

    def selected_item(self) -> Optional[LayoutItem]:
        index = self.selected_index
        return None if index is None else self.filtered_items()[index]

    # Search text

    def set_search_text(self, text: str) -> None:
        """Replace the search text; the selection is cleared."""
        if text == self._search_text:
            return
        self._search_text = text
        self.emit("search-changed", text)
        self._set_selected(None)

    def append_search_text(self, chars: str) -> None:
        self.set_search_text(self._search_text + chars)

    def delete_last_char(self) -> None:
        if self._search_text:
            self.set_search_text(self._search_text[:-1])

    def clear_search(self) -> None:
        self.set_search_text("")

    # Selection

    def move(self, direction: Direction, columns: int) -> Optional[int]:
        """
        Move the selection one step.

        Args:
            direction: Arrow direction
            columns: Current column count; read fresh on every call

        Returns:
            The new selected index, or None if the view is empty
        """
        count = len(self.filtered_items())
        if count == 0:
            return None

        current = self.selected_index
        if current is None:
            current = 0

        index = next_index(current, direction.offset(columns), count, wrap=direction.is_horizontal)
        self._set_selected(index)
        return index

    def select(self, index: Optional[int]) -> None:
        """Select index directly; out-of-range indexes clear the selection."""
        if index is not None and not 0 <= index < len(self.filtered_items()):
            index = None
        self._set_selected(index)

    def activate(self, open_path: Callable[[str], object], open_folder: Callable[[str], object]) -> bool:
        """
        Open the selected item.

        Args:
            open_path: Called with an application's path
            open_folder: Called with a folder's id

        Returns:
            True if something was activated
        """
        item = self.selected_item()
        if item is None:
            return False

        app = as_application(item)
        if app is not None:
            open_path(app.path)
        else:
            open_folder(as_folder(item).id)
        return True

    def _set_selected(self, index: Optional[int]) -> None:
        if index == self._selected_index:
            return
        self._selected_index = index
        self.emit("selection-changed", index)

    def _on_layout_changed(self) -> None:
        if self._selected_index is None:
            return
        count = len(self.filtered_items())
        if count == 0:
            index = None
        else:
            index = min(self._selected_index, count - 1)
        if index != self._selected_index:
            logger.debug(f"Selection clamped from {self._selected_index} to {index}")
        self._set_selected(index)

    def close(self) -> None:
        """Stop following the store."""
        self.store.disconnect(self._store_handler)
