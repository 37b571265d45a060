"""
Launcher items - Applications, folders and the tagged LayoutItem.

A LayoutItem wraps exactly one of an Application or a Folder. Its identity
is the wrapped entity's id. Entities are immutable; a folder rename or
membership change produces a new Folder with the same id.
"""

import uuid
from dataclasses import dataclass, field, replace
from typing import Optional

DEFAULT_FOLDER_NAME = "New Folder"


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Application:
    """An installed application discovered on disk."""
    name: str
    path: str
    id: str = field(default_factory=new_id)


@dataclass(frozen=True)
class Folder:
    """A user-created group of applications."""
    name: str = DEFAULT_FOLDER_NAME
    apps: tuple[Application, ...] = ()
    id: str = field(default_factory=new_id)

    def __post_init__(self):
        # Accept any sequence, store a tuple
        object.__setattr__(self, "apps", tuple(self.apps))

    def contains(self, app_id: str) -> bool:
        return any(app.id == app_id for app in self.apps)

    def renamed(self, name: str) -> "Folder":
        return replace(self, name=name)

    def with_app(self, app: Application) -> "Folder":
        return replace(self, apps=self.apps + (app,))

    def without_app(self, app_id: str) -> "Folder":
        return replace(self, apps=tuple(a for a in self.apps if a.id != app_id))


@dataclass(frozen=True)
class LayoutItem:
    """
    One top-level grid entry: an Application or a Folder, never both.

    Use LayoutItem.of() to wrap an entity, and is_folder()/as_application()
    to inspect it.
    """
    application: Optional[Application] = None
    folder: Optional[Folder] = None

    def __post_init__(self):
        if (self.application is None) == (self.folder is None):
            raise ValueError("LayoutItem needs exactly one of application or folder")

    @classmethod
    def of(cls, entity) -> "LayoutItem":
        if isinstance(entity, Application):
            return cls(application=entity)
        if isinstance(entity, Folder):
            return cls(folder=entity)
        raise TypeError(f"Cannot wrap {type(entity).__name__} in a LayoutItem")

    @property
    def id(self) -> str:
        return self.folder.id if self.folder is not None else self.application.id

    @property
    def name(self) -> str:
        """Display name used for filtering and labels."""
        return self.folder.name if self.folder is not None else self.application.name


def is_folder(item: LayoutItem) -> bool:
    return item.folder is not None


def as_application(item: LayoutItem) -> Optional[Application]:
    return item.application


def as_folder(item: LayoutItem) -> Optional[Folder]:
    return item.folder
