"""
Shared test fixtures for the Gridpad test suite.

Provides applications, layouts, a store wired to a real layout file and
real settings/desktop files under tmp_path (no mocking of the filesystem).
"""

import json

import pytest
import toml

from gridpad.layout.codec import encode_layout
from gridpad.layout.items import Application, Folder, LayoutItem
from gridpad.services.persistence import LayoutPersistence
from gridpad.services.store import LayoutStore


@pytest.fixture
def apps():
    """Three applications named A, B and C."""
    return [
        Application(name="AppA", path="/apps/AppA.app"),
        Application(name="AppB", path="/apps/AppB.app"),
        Application(name="AppC", path="/apps/AppC.app"),
    ]


@pytest.fixture
def layout_file(tmp_path):
    return tmp_path / "layout.json"


@pytest.fixture
def scanned():
    """Applications returned by the fake scanner, recorded per call."""
    return []


@pytest.fixture
def make_store(layout_file, scanned):
    """Build a LayoutStore over layout_file holding the given items."""
    def _make(items=()):
        store = LayoutStore(LayoutPersistence(layout_file), lambda: list(scanned))
        if items:
            store.commit([LayoutItem.of(entity) for entity in items])
        return store
    return _make


@pytest.fixture
def saved_layout(layout_file, apps):
    """A layout file holding a folder of A and B followed by C."""
    folder = Folder(name="Work", apps=apps[:2])
    items = [LayoutItem.of(folder), LayoutItem.of(apps[2])]
    layout_file.write_text(json.dumps(encode_layout(items), indent=2))
    return items


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with all sections."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "grid": {"item_width": 100},
        "discovery": {
            "directories": [str(tmp_path / "applications")],
            "extensions": [".desktop"],
        },
        "layout": {"path": str(tmp_path / "layout.json")},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path


@pytest.fixture
def desktop_dir(tmp_path):
    """A directory of .desktop files, one of them hidden."""
    directory = tmp_path / "applications"
    directory.mkdir()
    (directory / "firefox.desktop").write_text(
        "[Desktop Entry]\nType=Application\nName=Firefox\nExec=firefox %u\n"
    )
    (directory / "code.desktop").write_text(
        "[Desktop Entry]\nType=Application\nName=Visual Studio Code\nExec=code\n"
    )
    (directory / "helper.desktop").write_text(
        "[Desktop Entry]\nType=Application\nName=Helper\nNoDisplay=true\n"
    )
    (directory / "notes.txt").write_text("not an application")
    return directory
