"""Test configuration for paletteplot."""

import threading

import pytest

from paletteplot.app.core import AppState
from paletteplot.app.state_manager import StateManager
from paletteplot.colorspace import default_catalog, entry_by_id


@pytest.fixture(scope="session")
def catalog():
    """Catalog over the color library's spaces, shared by all tests."""
    return default_catalog()


@pytest.fixture
def state(catalog):
    return AppState.initial(catalog)


@pytest.fixture
def lock():
    return threading.RLock()


@pytest.fixture
def manager(state, lock):
    return StateManager(state, lock)


@pytest.fixture
def oklch_l(catalog):
    return entry_by_id(catalog, "oklch/l")


@pytest.fixture
def srgb_r(catalog):
    return entry_by_id(catalog, "srgb/r")
