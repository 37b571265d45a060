"""
Merge/Extract Engine - What happens when one grid item is dropped on another.

Outcomes:
  - app onto app      -> both leave the grid, a "New Folder" holding
                         [dragged, target] takes the target's place
  - app onto folder   -> the app is appended to the folder
  - anything else     -> rejected, layout untouched

Folders are never draggable as a unit, so any drop involving a dragged
folder is rejected. Dragging an app out of an open folder goes through
FolderDragPayload and LayoutStore.remove_app_from_folder instead.
"""

import base64
import binascii
import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from loguru import logger

from .codec import LayoutDecodeError, decode_application, encode_application
from .items import DEFAULT_FOLDER_NAME, Application, Folder, LayoutItem, as_application, as_folder, is_folder


class DropOutcome(Enum):
    REJECT = "reject"
    CREATE_FOLDER = "create_folder"
    APPEND_TO_FOLDER = "append_to_folder"


def decide_drop(dragged: LayoutItem, target: LayoutItem) -> DropOutcome:
    """Classify a drop from the shapes of the dragged and target items."""
    if dragged.id == target.id:
        return DropOutcome.REJECT
    if is_folder(dragged):
        return DropOutcome.REJECT
    if is_folder(target):
        if target.folder.contains(dragged.id):
            return DropOutcome.REJECT
        return DropOutcome.APPEND_TO_FOLDER
    return DropOutcome.CREATE_FOLDER


def apply_drop(items, dragged: LayoutItem, target: LayoutItem) -> Optional[list[LayoutItem]]:
    """
    Compute the layout after dropping dragged onto target.

    The dragged item is removed first and the target is then looked up
    again by id, so the insertion point is always measured against the
    post-removal list.

    Returns:
        The new item list, or None if the drop is rejected or either
        item is not in the layout
    """
    outcome = decide_drop(dragged, target)
    if outcome is DropOutcome.REJECT:
        return None

    items = list(items)
    dragged_index = _index_of(items, dragged.id)
    if dragged_index is None or _index_of(items, target.id) is None:
        return None

    del items[dragged_index]
    target_index = _index_of(items, target.id)
    current_target = items[target_index]
    dragged_app = as_application(dragged)

    if outcome is DropOutcome.CREATE_FOLDER:
        del items[target_index]
        folder = Folder(name=DEFAULT_FOLDER_NAME, apps=(dragged_app, as_application(current_target)))
        items.insert(target_index, LayoutItem.of(folder))
    else:
        folder = as_folder(current_target)
        items[target_index] = LayoutItem.of(folder.with_app(dragged_app))

    return items


def _index_of(items, item_id: str) -> Optional[int]:
    for index, item in enumerate(items):
        if item.id == item_id:
            return index
    return None


class MergeEngine:
    """
    Applies drops to a LayoutStore.

    Args:
        store: The LayoutStore that owns the layout
    """

    def __init__(self, store):
        self.store = store

    def drop(self, dragged: LayoutItem, target: LayoutItem) -> bool:
        """
        Drop dragged onto target and commit the result.

        Both items are re-read from the store by id so a stale copy from
        the view never overwrites newer folder contents.

        Returns:
            True if the layout changed, False if the drop was rejected
        """
        live_dragged = self.store.find(dragged.id)
        live_target = self.store.find(target.id)
        if live_dragged is None or live_target is None:
            logger.debug(f"Drop ignored: {dragged.id} or {target.id} not in layout")
            return False

        items = apply_drop(self.store.items, live_dragged, live_target)
        if items is None:
            logger.debug(f"Drop of '{live_dragged.name}' onto '{live_target.name}' rejected")
            return False

        self.store.commit(items)
        logger.debug(f"Dropped '{live_dragged.name}' onto '{live_target.name}'")
        return True

    def extract(self, payload: "FolderDragPayload") -> bool:
        """Drop an app dragged out of a folder back onto the grid."""
        return self.store.remove_app_from_folder(payload.app, payload.folder_id)


@dataclass(frozen=True)
class FolderDragPayload:
    """An app being dragged out of an open folder."""
    app: Application
    folder_id: str

    def encode(self) -> str:
        """Serialize for a toolkit drag-and-drop text channel."""
        data = {"app": encode_application(self.app), "folder_id": self.folder_id}
        return base64.b64encode(json.dumps(data).encode("utf-8")).decode("ascii")

    @classmethod
    def decode(cls, text: str) -> Optional["FolderDragPayload"]:
        """
        Parse an encoded payload.

        Returns:
            The payload, or None if text is not a folder drag payload
            (e.g. a plain item id from a grid drag)
        """
        try:
            data = json.loads(base64.b64decode(text, validate=True))
            folder_id = data["folder_id"]
            app = decode_application(data["app"])
        except (binascii.Error, ValueError, TypeError, KeyError, LayoutDecodeError):
            return None
        if not isinstance(folder_id, str):
            return None
        return cls(app=app, folder_id=folder_id)
