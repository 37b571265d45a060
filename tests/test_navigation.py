"""
Tests for search filtering, index arithmetic and the Navigator.
"""

from unittest.mock import MagicMock

import pytest

from gridpad.layout.items import Application, Folder, LayoutItem
from gridpad.navigation.filter import filter_items
from gridpad.navigation.navigator import Direction, Navigator, next_index


def _five_apps():
    return [Application(name=f"App {i}", path=f"/apps/{i}") for i in range(5)]


class TestFilter:
    """Test the filtered view."""

    def test_empty_search_returns_everything_in_order(self, apps):
        items = [LayoutItem.of(app) for app in apps]
        assert filter_items(items, "") == items

    def test_case_insensitive_substring(self, apps):
        items = [LayoutItem.of(app) for app in apps]
        assert [i.name for i in filter_items(items, "appb")] == ["AppB"]
        assert [i.name for i in filter_items(items, "PP")] == ["AppA", "AppB", "AppC"]

    def test_folders_match_on_folder_name(self, apps):
        items = [LayoutItem.of(Folder(name="Games", apps=apps[:2])), LayoutItem.of(apps[2])]
        assert [i.name for i in filter_items(items, "gam")] == ["Games"]
        # Apps inside a folder do not make the folder match
        assert filter_items(items, "AppA") == []

    def test_no_match(self, apps):
        assert filter_items([LayoutItem.of(app) for app in apps], "zzz") == []


class TestNextIndex:
    """Test wrap and clamp arithmetic."""

    def test_empty_view(self):
        assert next_index(0, 1, 0, wrap=True) is None
        assert next_index(0, 3, 0, wrap=False) is None

    def test_horizontal_wraps_backwards(self):
        assert next_index(0, -1, 5, wrap=True) == 4

    def test_horizontal_wraps_forwards(self):
        assert next_index(4, 1, 5, wrap=True) == 0

    def test_vertical_clamps_at_top(self):
        assert next_index(0, -3, 5, wrap=False) == 0

    def test_vertical_clamps_at_bottom(self):
        assert next_index(3, 3, 5, wrap=False) == 4
        assert next_index(4, 3, 5, wrap=False) == 4

    def test_regression_five_items_three_columns(self):
        assert next_index(4, -1, 5, wrap=True) == 3
        assert next_index(0, -3, 5, wrap=False) == 0
        assert next_index(0, 3, 5, wrap=False) == 3

    def test_step_from_first_never_lands_on_last(self):
        assert next_index(0, 3, 4, wrap=False) == 0
        assert next_index(0, 1, 2, wrap=False) == 0

    def test_step_from_last_never_lands_on_first(self):
        assert next_index(3, -3, 4, wrap=False) == 3
        assert next_index(1, -1, 2, wrap=False) == 1

    def test_boundary_steps_do_not_wrap(self):
        # Repeated steps off either end stay put
        assert next_index(0, -1, 2, wrap=False) == 0
        assert next_index(1, 1, 2, wrap=False) == 1

    def test_single_item(self):
        assert next_index(0, 1, 1, wrap=True) == 0
        assert next_index(0, -4, 1, wrap=False) == 0


class TestDirection:
    """Test offsets per direction."""

    @pytest.mark.parametrize("direction,expected", [
        (Direction.LEFT, -1),
        (Direction.RIGHT, 1),
        (Direction.UP, -3),
        (Direction.DOWN, 3),
    ])
    def test_offsets(self, direction, expected):
        assert direction.offset(3) == expected

    def test_zero_columns_treated_as_one(self):
        assert Direction.DOWN.offset(0) == 1


class TestNavigator:
    """Test selection state against a live store."""

    def test_move_on_empty_view_is_noop(self, make_store):
        navigator = Navigator(make_store())
        assert navigator.move(Direction.RIGHT, 3) is None
        assert navigator.selected_index is None

    def test_first_move_starts_from_zero(self, make_store):
        navigator = Navigator(make_store(_five_apps()))
        assert navigator.move(Direction.RIGHT, 3) == 1
        navigator.select(None)
        assert navigator.move(Direction.LEFT, 3) == 4

    def test_grid_walk(self, make_store):
        navigator = Navigator(make_store(_five_apps()))
        navigator.select(4)
        assert navigator.move(Direction.LEFT, 3) == 3
        navigator.select(0)
        assert navigator.move(Direction.UP, 3) == 0
        assert navigator.move(Direction.DOWN, 3) == 3
        assert navigator.move(Direction.DOWN, 3) == 4

    def test_columns_read_per_call(self, make_store):
        navigator = Navigator(make_store(_five_apps()))
        navigator.select(0)
        assert navigator.move(Direction.DOWN, 2) == 2
        assert navigator.move(Direction.DOWN, 1) == 3

    def test_search_change_clears_selection(self, make_store, apps):
        navigator = Navigator(make_store(apps))
        navigator.select(2)
        navigator.set_search_text("appa")
        assert navigator.selected_index is None
        assert [i.name for i in navigator.filtered_items()] == ["AppA"]

    @pytest.mark.parametrize("text", ["", "a", "AppC", "zzz"])
    def test_selection_valid_after_any_search(self, make_store, apps, text):
        navigator = Navigator(make_store(apps))
        navigator.select(2)
        navigator.set_search_text(text)
        index = navigator.selected_index
        assert index is None or 0 <= index < len(navigator.filtered_items())

    def test_move_in_filtered_view(self, make_store, apps):
        extra = Application(name="Terminal", path="/t")
        navigator = Navigator(make_store([*apps, extra]))
        navigator.set_search_text("app")
        assert navigator.move(Direction.LEFT, 4) == 2
        assert navigator.selected_item().name == "AppC"

    def test_layout_change_clamps_selection(self, make_store, apps):
        store = make_store(apps)
        navigator = Navigator(store)
        navigator.select(2)
        store.commit([LayoutItem.of(apps[0])])
        assert navigator.selected_index == 0

    def test_layout_emptied_clears_selection(self, make_store, apps):
        store = make_store(apps)
        navigator = Navigator(store)
        navigator.select(1)
        store.commit([])
        assert navigator.selected_index is None

    def test_select_out_of_range_clears(self, make_store, apps):
        navigator = Navigator(make_store(apps))
        navigator.select(7)
        assert navigator.selected_index is None

    def test_typing_helpers(self, make_store, apps):
        navigator = Navigator(make_store(apps))
        navigator.append_search_text("a")
        navigator.append_search_text("b")
        assert navigator.search_text == "ab"
        navigator.delete_last_char()
        assert navigator.search_text == "a"
        navigator.clear_search()
        assert navigator.search_text == ""
        navigator.delete_last_char()
        assert navigator.search_text == ""

    def test_signals(self, make_store, apps):
        navigator = Navigator(make_store(apps))
        on_select = MagicMock()
        on_search = MagicMock()
        navigator.connect("selection-changed", on_select)
        navigator.connect("search-changed", on_search)

        navigator.move(Direction.RIGHT, 3)
        on_select.assert_called_once_with(navigator, 1)

        navigator.set_search_text("app")
        on_search.assert_called_once_with(navigator, "app")
        on_select.assert_called_with(navigator, None)

    def test_unknown_signal_rejected(self, make_store):
        with pytest.raises(TypeError):
            Navigator(make_store()).connect("activated", lambda *a: None)


class TestActivate:
    """Test opening the selected item."""

    def test_activate_app_opens_path(self, make_store, apps):
        navigator = Navigator(make_store(apps))
        navigator.select(1)
        open_path, open_folder = MagicMock(), MagicMock()
        assert navigator.activate(open_path, open_folder) is True
        open_path.assert_called_once_with("/apps/AppB.app")
        open_folder.assert_not_called()

    def test_activate_folder_opens_folder(self, make_store, apps):
        folder = Folder(apps=apps[:2])
        navigator = Navigator(make_store([folder]))
        navigator.select(0)
        open_path, open_folder = MagicMock(), MagicMock()
        navigator.activate(open_path, open_folder)
        open_folder.assert_called_once_with(folder.id)
        open_path.assert_not_called()

    def test_activate_without_selection(self, make_store, apps):
        navigator = Navigator(make_store(apps))
        open_path = MagicMock()
        assert navigator.activate(open_path, MagicMock()) is False
        open_path.assert_not_called()
