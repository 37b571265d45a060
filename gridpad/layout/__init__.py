"""
Layout package - Launcher items and the rules for combining them.
"""

from .codec import LayoutDecodeError, UnrecognizedVariantError, decode_layout, encode_layout
from .items import Application, Folder, LayoutItem, as_application, as_folder, is_folder
from .merge import DropOutcome, FolderDragPayload, MergeEngine, apply_drop, decide_drop

__all__ = [
    "Application",
    "Folder",
    "LayoutItem",
    "is_folder",
    "as_application",
    "as_folder",
    "encode_layout",
    "decode_layout",
    "LayoutDecodeError",
    "UnrecognizedVariantError",
    "DropOutcome",
    "FolderDragPayload",
    "MergeEngine",
    "apply_drop",
    "decide_drop",
]
