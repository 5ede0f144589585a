"""Data model and error taxonomy."""

from dataclasses import asdict, dataclass
from enum import IntEnum
from typing import Any

__all__ = [
    "Catalog",
    "CommandEntry",
    "ConfigError",
    "ExecutionError",
    "ExitCode",
    "NotFoundError",
    "SpawnError",
    "SttrError",
    "catalog_from_dict",
    "catalog_to_dict",
    "sorted_catalog",
]


@dataclass(frozen=True)
class CommandEntry:
    """One transformation offered by the external tool."""

    label: str
    command: str  # literal argument passed to the binary
    description: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return a JSON friendly representation."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CommandEntry":
        """Build an entry from its JSON representation.

        Raises:
            ValueError: if the command token is missing, blank or contains whitespace
        """
        command = str(data.get("command") or "").strip()
        if not command or any(char.isspace() for char in command):
            msg = f"Invalid command token: {data.get('command')!r}"
            raise ValueError(msg)
        return cls(
            label=str(data.get("label") or command),
            command=command,
            description=str(data.get("description") or "").strip(),
        )


Catalog = dict[str, list[CommandEntry]]
""" category name -> ordered entries """


def sorted_catalog(catalog: Catalog) -> Catalog:
    """Return a copy of `catalog` with each category sorted by label (case-insensitive)."""
    return {category: sorted(entries, key=lambda e: e.label.lower()) for category, entries in catalog.items()}


def catalog_to_dict(catalog: Catalog) -> dict[str, list[dict[str, str]]]:
    """Serialize a catalog."""
    return {category: [entry.to_dict() for entry in entries] for category, entries in catalog.items()}


def catalog_from_dict(data: object) -> Catalog:
    """Deserialize a catalog, skipping malformed categories and entries."""
    catalog: Catalog = {}
    if not isinstance(data, dict):
        return catalog
    for category, raw_entries in data.items():
        if not isinstance(raw_entries, list):
            continue
        entries = []
        for raw in raw_entries:
            if not isinstance(raw, dict):
                continue
            try:
                entries.append(CommandEntry.from_dict(raw))
            except ValueError:
                continue
        if entries:
            catalog[str(category)] = entries
    return catalog


class SttrError(Exception):
    """Base class for pysttr errors."""


class ConfigError(SttrError):
    """The configuration file can't be used."""


class NotFoundError(SttrError):
    """The sttr binary could not be located."""

    def __init__(self, message: str = "STTR binary not found. Please install the sttr CLI utility.") -> None:
        super().__init__(message)


class SpawnError(SttrError):
    """The process could not be started."""

    def __init__(self, binary: str, cause: OSError) -> None:
        self.binary = binary
        self.cause = cause
        super().__init__(f"unable to start {binary}: {cause}")


class ExecutionError(SttrError):
    """The process exited with a non-zero code."""

    def __init__(self, exit_code: int, stderr: str) -> None:
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(f"sttr command failed (exit code {exit_code}): {stderr}")


class ExitCode(IntEnum):
    """Exit codes of the pysttr command."""

    SUCCESS = 0
    USAGE_ERROR = 1
    NOT_FOUND = 2
    COMMAND_ERROR = 3
