"""The command catalog and its lifecycle.

`CommandCatalog` owns the category -> commands mapping. It starts empty,
is filled by `load` (persisted snapshot, or the built-in catalog), and
`refresh` re-derives it from the live help output of the binary.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from .constants import SNAPSHOT_KEY
from .defaults import default_catalog
from .invoke import read_help
from .locator import ProbeStrategy, default_probes, locate
from .logging_setup import get_logger
from .models import Catalog, CommandEntry, SttrError, catalog_from_dict, catalog_to_dict
from .parsing import parse_help

if TYPE_CHECKING:
    from .storage import SnapshotStore

__all__ = ["CommandCatalog"]


class CommandCatalog:
    """Shared, read-mostly catalog; `refresh` is the only mutator."""

    def __init__(
        self,
        store: SnapshotStore,
        probes_factory: Callable[[], list[ProbeStrategy]] = default_probes,
    ) -> None:
        """Initialize an empty catalog.

        Args:
            store: where the last successful parse is persisted
            probes_factory: returns the locator strategies, called on each refresh
        """
        self.store = store
        self.probes_factory = probes_factory
        self.log = get_logger("catalog")
        self._catalog: Catalog = {}

    def get(self) -> Catalog:
        """Return the current in-memory catalog."""
        return self._catalog

    async def load(self) -> Catalog:
        """Populate the catalog from the persisted snapshot, or the built-in one."""
        snapshot = catalog_from_dict(await self.store.get(SNAPSHOT_KEY))
        if snapshot:
            self.log.debug("Loaded %d categories from snapshot", len(snapshot))
            self._catalog = snapshot
        else:
            self.log.debug("No snapshot, using the built-in catalog")
            self._catalog = default_catalog()
        return self._catalog

    async def refresh(self) -> bool:
        """Re-derive the catalog from the binary help output.

        The catalog and its snapshot are only replaced by a non-empty parse.
        Failures are logged, never raised.

        Returns:
            True if the catalog was updated
        """
        binary = await locate(self.probes_factory(), log=self.log)
        if binary is None:
            self.log.warning("Can't refresh commands: sttr binary not found")
            return False
        try:
            help_text = await read_help(binary, log=self.log)
        except SttrError as e:
            self.log.warning("Can't refresh commands: %s", e)
            return False
        catalog = parse_help(help_text)
        if not catalog:
            self.log.warning("No command found in the output of %s, keeping the current list", binary)
            return False
        self._catalog = catalog
        try:
            await self.store.update(SNAPSHOT_KEY, catalog_to_dict(catalog))
        except OSError as e:
            self.log.warning("Unable to save commands in %s: %s", self.store.path, e)
        self.log.info("Found %d commands in %d categories", self.count(), len(catalog))
        return True

    def iter_entries(self) -> Iterator[tuple[str, CommandEntry]]:
        """Yield (category, entry) pairs."""
        for category, entries in self._catalog.items():
            for entry in entries:
                yield category, entry

    def count(self) -> int:
        """Return the number of entries."""
        return sum(len(entries) for entries in self._catalog.values())

    def find(self, token: str) -> CommandEntry | None:
        """Return the entry using `token`, if any."""
        for _category, entry in self.iter_entries():
            if entry.command == token:
                return entry
        return None
