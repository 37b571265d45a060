"""
Folder Panel - The open view of a single folder.

Features:
- Always reads the live folder from the store (never a stale copy)
- Rename the folder
- Click an app to open it
- Drag an app out (FolderDragPayload) to put it back on the grid
"""

from typing import Callable, Optional

from loguru import logger

from ..layout.items import Application, Folder
from ..layout.merge import FolderDragPayload


class FolderPanel:
    """
    Folder-view context scoped to one folder id.

    The panel is considered closed as soon as its folder no longer exists,
    e.g. after it collapsed into a single app.
    """

    def __init__(self, folder_id: str, store, opener: Callable[[str], object]):
        self.folder_id = folder_id
        self.store = store
        self.opener = opener

    @property
    def folder(self) -> Optional[Folder]:
        return self.store.folder(self.folder_id)

    @property
    def is_open(self) -> bool:
        return self.folder is not None

    @property
    def apps(self) -> tuple[Application, ...]:
        folder = self.folder
        return folder.apps if folder else ()

    def rename(self, new_name: str) -> bool:
        return self.store.rename_folder(self.folder_id, new_name)

    def on_app_click(self, app: Application) -> None:
        """Open an app from inside the folder."""
        self.opener(app.path)

    def on_drag_prepare(self, app: Application) -> Optional[str]:
        """
        Start dragging an app out of the folder.

        Returns:
            Encoded FolderDragPayload, or None if the app is not in the folder
        """
        folder = self.folder
        if folder is None or not folder.contains(app.id):
            logger.debug(f"Ignoring drag of {app.name}: not in folder {self.folder_id}")
            return None
        return FolderDragPayload(app=app, folder_id=self.folder_id).encode()
