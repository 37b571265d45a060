"""
Layout Codec - Convert layouts to and from tagged JSON records.

Each record carries exactly one tag:
  {"application": {"id": ..., "name": ..., "path": ...}}
  {"folder": {"id": ..., "name": ..., "apps": [<application>, ...]}}

Decoding is strict: a record with neither or both tags raises
UnrecognizedVariantError instead of defaulting to one variant.
"""

from typing import Any

from .items import Application, Folder, LayoutItem

APPLICATION_TAG = "application"
FOLDER_TAG = "folder"


class LayoutDecodeError(ValueError):
    """Persisted data does not match the layout record shape."""


class UnrecognizedVariantError(LayoutDecodeError):
    """A record has neither or both of the application/folder tags."""


def encode_application(app: Application) -> dict:
    return {"id": app.id, "name": app.name, "path": app.path}


def encode_item(item: LayoutItem) -> dict:
    if item.folder is not None:
        folder = item.folder
        return {
            FOLDER_TAG: {
                "id": folder.id,
                "name": folder.name,
                "apps": [encode_application(app) for app in folder.apps],
            }
        }
    return {APPLICATION_TAG: encode_application(item.application)}


def encode_layout(items) -> list[dict]:
    """Encode an ordered sequence of LayoutItems."""
    return [encode_item(item) for item in items]


def _require_str(data: dict, key: str, context: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise LayoutDecodeError(f"{context}: field '{key}' must be a string, got {value!r}")
    return value


def decode_application(data: Any) -> Application:
    if not isinstance(data, dict):
        raise LayoutDecodeError(f"application record must be an object, got {type(data).__name__}")
    return Application(
        id=_require_str(data, "id", "application"),
        name=_require_str(data, "name", "application"),
        path=_require_str(data, "path", "application"),
    )


def decode_folder(data: Any) -> Folder:
    if not isinstance(data, dict):
        raise LayoutDecodeError(f"folder record must be an object, got {type(data).__name__}")
    apps = data.get("apps")
    if not isinstance(apps, list):
        raise LayoutDecodeError(f"folder: field 'apps' must be a list, got {apps!r}")
    folder = Folder(
        id=_require_str(data, "id", "folder"),
        name=_require_str(data, "name", "folder"),
        apps=tuple(decode_application(app) for app in apps),
    )

    app_ids = [app.id for app in folder.apps]
    if len(app_ids) != len(set(app_ids)):
        raise LayoutDecodeError(f"folder {folder.id}: duplicate app ids")
    return folder


def decode_item(record: Any) -> LayoutItem:
    if not isinstance(record, dict):
        raise LayoutDecodeError(f"layout record must be an object, got {type(record).__name__}")

    has_app = APPLICATION_TAG in record
    has_folder = FOLDER_TAG in record
    if has_app == has_folder:
        raise UnrecognizedVariantError(
            f"layout record must carry exactly one of '{APPLICATION_TAG}' or "
            f"'{FOLDER_TAG}', got keys {sorted(record)}"
        )

    if has_app:
        return LayoutItem(application=decode_application(record[APPLICATION_TAG]))
    return LayoutItem(folder=decode_folder(record[FOLDER_TAG]))


def decode_layout(data: Any) -> list[LayoutItem]:
    """
    Decode a list of tagged records into LayoutItems.

    Raises:
        LayoutDecodeError: If the data is not a list of valid records,
            if top-level ids are duplicated, or if an app inside a folder
            shares its id with a top-level item
    """
    if not isinstance(data, list):
        raise LayoutDecodeError(f"layout must be a list, got {type(data).__name__}")

    items = [decode_item(record) for record in data]

    seen = set()
    for item in items:
        if item.id in seen:
            raise LayoutDecodeError(f"duplicate item id {item.id}")
        seen.add(item.id)

    for item in items:
        if item.folder is None:
            continue
        for app in item.folder.apps:
            if app.id in seen:
                raise LayoutDecodeError(
                    f"folder {item.id}: app id {app.id} also appears at the top level"
                )

    return items
