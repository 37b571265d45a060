"""
Grid Panel - Toolkit-independent controller for the main launcher grid.

Translates user input into engine calls:
- Arrow keys move the selection (columns derived from the current width)
- Enter opens the selected app or folder
- Escape clears the search, BackSpace/Delete removes one character,
  any other printable character is typed into the search
- Dropping a grid item on another merges them; dropping an app dragged
  out of a folder extracts it

Key names follow Gdk.keyval_name() so a toolkit can forward them as-is.
"""

from typing import Callable, Optional

from loguru import logger

from ..layout.items import LayoutItem, as_application, as_folder
from ..layout.merge import FolderDragPayload, MergeEngine
from ..navigation.navigator import Direction, Navigator
from ..utils.helpers import column_count
from .folder import FolderPanel

ARROW_KEYS = {
    "Left": Direction.LEFT,
    "Right": Direction.RIGHT,
    "Up": Direction.UP,
    "Down": Direction.DOWN,
}
ACTIVATE_KEYS = {"Return", "KP_Enter"}
DELETE_KEYS = {"BackSpace", "Delete"}


class GridPanel:
    """
    Main grid: selection, search typing, drag-and-drop and folder opening.

    Args:
        store: LayoutStore owning the layout
        navigator: Navigator owning selection and search text
        merge_engine: MergeEngine applying drops to the store
        opener: Called with an application path to launch it
        item_width: Grid cell width in pixels
    """

    def __init__(self, store, navigator: Navigator, merge_engine: MergeEngine,
                 opener: Callable[[str], object], item_width: int = 120):
        self.store = store
        self.navigator = navigator
        self.merge_engine = merge_engine
        self.opener = opener
        self.item_width = item_width

        self.width = 0
        self.active_folder: Optional[FolderPanel] = None

        self.store.connect("changed", lambda _store: self._on_layout_changed())

    def visible_items(self) -> list[LayoutItem]:
        return self.navigator.filtered_items()

    @property
    def columns(self) -> int:
        return column_count(self.width, self.item_width)

    def set_width(self, width: float) -> None:
        """Record the available width after a resize."""
        self.width = width

    # Keyboard

    def on_key_press(self, keyval: str, text: str = "") -> bool:
        """
        Handle a key press.

        Args:
            keyval: Key name, e.g. "Left", "Return", "a"
            text: Character the key produced, if any

        Returns:
            True if the key was handled
        """
        direction = ARROW_KEYS.get(keyval)
        if direction is not None:
            self.navigator.move(direction, self.columns)
            return True

        if keyval in ACTIVATE_KEYS:
            return self.navigator.activate(self.opener, self.open_folder)

        if keyval == "Escape":
            self.navigator.clear_search()
            return True

        if keyval in DELETE_KEYS:
            self.navigator.delete_last_char()
            return True

        if len(text) == 1 and text.isprintable():
            self.navigator.append_search_text(text)
            return True

        return False

    # Mouse

    def on_item_click(self, item: LayoutItem) -> None:
        app = as_application(item)
        if app is not None:
            self.opener(app.path)
        else:
            self.open_folder(as_folder(item).id)

    # Drag and drop

    def on_drag_prepare(self, item: LayoutItem) -> str:
        """Start dragging a grid item; the drag carries its id."""
        return item.id

    def on_drop(self, target: Optional[LayoutItem], payload: str) -> bool:
        """
        Handle a drop on the grid.

        Args:
            target: Item under the pointer, or None for empty grid space
            payload: Text carried by the drag (item id or folder payload)

        Returns:
            True if the layout changed
        """
        folder_payload = FolderDragPayload.decode(payload)
        if folder_payload is not None:
            return self.merge_engine.extract(folder_payload)

        if target is None:
            return False

        dragged = self.store.find(payload)
        if dragged is None:
            logger.debug(f"Drop payload {payload!r} does not name a grid item")
            return False

        return self.merge_engine.drop(dragged, target)

    # Folders

    def open_folder(self, folder_id: str) -> Optional[FolderPanel]:
        if self.store.folder(folder_id) is None:
            return None
        self.active_folder = FolderPanel(folder_id, self.store, self.opener)
        logger.debug(f"Opened folder {folder_id}")
        return self.active_folder

    def close_folder(self) -> None:
        self.active_folder = None

    def reset_layout(self) -> None:
        """Forget the arrangement and start over from installed apps."""
        self.close_folder()
        self.store.reset_layout()

    def _on_layout_changed(self) -> None:
        if self.active_folder is not None and not self.active_folder.is_open:
            logger.debug(f"Folder {self.active_folder.folder_id} is gone, closing its view")
            self.active_folder = None
