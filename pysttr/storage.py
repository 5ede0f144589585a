"""Persisted state: a JSON file holding named slots."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import aiofiles
import aiofiles.os

from .logging_setup import get_logger

__all__ = ["SnapshotStore"]


class SnapshotStore:
    """Key/value storage persisted in a single JSON file.

    Attributes:
        path: location of the JSON file
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self.log = get_logger("storage")

    async def _read_all(self) -> dict[str, Any]:
        if not await aiofiles.os.path.exists(self.path):
            return {}
        try:
            async with aiofiles.open(self.path, encoding="utf-8") as f:
                data = json.loads(await f.read())
        except (OSError, ValueError) as e:
            self.log.warning("Ignoring unreadable state file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            self.log.warning("Ignoring malformed state file %s", self.path)
            return {}
        return data

    async def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401
        """Return the value stored under `key`, or `default`."""
        return (await self._read_all()).get(key, default)

    async def update(self, key: str, value: Any) -> None:  # noqa: ANN401
        """Store `value` under `key`, keeping the other slots.

        The file is written next to its final location then renamed.
        """
        data = await self._read_all()
        data[key] = value
        await aiofiles.os.makedirs(self.path.parent, exist_ok=True)
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")
        async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
            await f.write(json.dumps(data, indent=2))
        await aiofiles.os.replace(tmp_path, self.path)
        self.log.debug("Saved %s in %s", key, self.path)
