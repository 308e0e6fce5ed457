"""Shared pytest fixtures for package, store and controller tests."""

from unittest.mock import Mock

import pytest

from bytepack.formats.config_store import ConfigStore
from editor.controllers.package_controller import PackageController
from editor.controllers.session_writer import SessionWriter


@pytest.fixture
def config_path(tmp_path):
    """Location of a config file that does not exist yet."""
    return tmp_path / "config" / "config.json"


@pytest.fixture
def store(config_path):
    """ConfigStore backed by a temporary file."""
    return ConfigStore(config_path)


@pytest.fixture
def sync_writer():
    """SessionWriter that runs saves inline."""
    return SessionWriter(background=False)


@pytest.fixture
def clipboard():
    """Clipboard stand-in that records the last text written."""
    return Mock(spec=["set_text", "get_text"])


@pytest.fixture
def controller(store, clipboard, sync_writer):
    """PackageController with a temporary store and inline persistence."""
    return PackageController(store, clipboard, sync_writer)


@pytest.fixture
def sample_records():
    """Two rows: a one-byte command and a two-byte length."""
    return [
        {"value": "01", "description": "x"},
        {"value": "0203", "description": "y"},
    ]
