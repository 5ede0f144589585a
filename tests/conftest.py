"""Generic fixtures."""

from pathlib import Path

import pytest

from pysttr.catalog import CommandCatalog
from pysttr.locator import KnownPath
from pysttr.storage import SnapshotStore

from .testtools import FAKE_STTR, make_script


def pytest_configure():
    "Runs once before all"
    from pysttr.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@pytest.fixture
def fake_sttr(tmp_path: Path) -> Path:
    "An executable behaving like sttr for a few commands"
    return make_script(tmp_path / "sttr", FAKE_STTR)


@pytest.fixture
def store(tmp_path: Path) -> SnapshotStore:
    return SnapshotStore(tmp_path / "state" / "state.json")


@pytest.fixture
def catalog(store: SnapshotStore, fake_sttr: Path) -> CommandCatalog:
    "A catalog locating the fake binary"
    return CommandCatalog(store, probes_factory=lambda: [KnownPath(fake_sttr)])


@pytest.fixture
def missing_catalog(store: SnapshotStore, tmp_path: Path) -> CommandCatalog:
    "A catalog which can't find any binary"
    return CommandCatalog(store, probes_factory=lambda: [KnownPath(tmp_path / "not-installed")])
