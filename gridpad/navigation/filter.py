"""
Search filter - Derive the visible subsequence of the layout.
"""

from ..layout.items import LayoutItem


def matches(item: LayoutItem, search_text: str) -> bool:
    """Case-insensitive substring match on the item's display name."""
    return search_text.casefold() in item.name.casefold()


def filter_items(items, search_text: str) -> list[LayoutItem]:
    """
    Return the items whose display name contains search_text.

    An empty search returns every item, in layout order.
    """
    if not search_text:
        return list(items)
    return [item for item in items if matches(item, search_text)]
