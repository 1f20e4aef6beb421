"""Shared pytest fixtures for SoloQuest tests."""

import sys
import pytest

from PyQt6.QtCore import QCoreApplication

from soloquest.controller import PlayerController
from soloquest.database.db import configure_engine, init_db
from soloquest.database.store import PlayerStore
from soloquest.settings import Settings


@pytest.fixture(scope="session")
def qapp():
    """A single QCoreApplication instance shared across the entire test run."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def store():
    return PlayerStore()


@pytest.fixture
def controller(qapp, store):
    """Fresh PlayerController loaded from the empty test database."""
    ctrl = PlayerController(store=store, settings=Settings(), parent=None)
    ctrl.load()
    return ctrl
