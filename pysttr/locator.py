"""Locate the sttr binary.

The lookup is an ordered list of probe strategies evaluated in turn, the first
one returning a path wins. Nothing is cached: a binary installed while the
program runs is found on the next call.
"""

from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from .constants import BINARY_NAME
from .logging_setup import get_logger

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable

__all__ = [
    "ExplicitPath",
    "KnownPath",
    "ProbeStrategy",
    "ShellLookup",
    "default_probes",
    "known_paths",
    "locate",
    "lookup_commands",
]


class ProbeStrategy:
    """A single way of finding the binary."""

    async def probe(self, log: logging.Logger) -> str | None:
        """Return the binary path, or None if this strategy can't find it."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.describe()})"

    def describe(self) -> str:
        """Short human readable description."""
        return ""


class ShellLookup(ProbeStrategy):
    """Ask the shell (`which`, `where`, `command -v`...)."""

    def __init__(self, command: str) -> None:
        self.command = command

    def describe(self) -> str:
        return self.command

    async def probe(self, log: logging.Logger) -> str | None:
        try:
            proc = await asyncio.create_subprocess_shell(
                self.command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.DEVNULL,
            )
            stdout, _ = await proc.communicate()
        except OSError as e:
            log.debug("%s failed: %s", self.command, e)
            return None
        if proc.returncode != 0:
            return None
        output = stdout.decode(errors="replace").strip()
        if not output:
            return None
        # `where` lists every match, keep the first one
        return output.splitlines()[0].strip()


class KnownPath(ProbeStrategy):
    """Check a well-known install location."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def describe(self) -> str:
        return str(self.path)

    async def probe(self, log: logging.Logger) -> str | None:
        try:
            found = self.path.exists()
        except OSError as e:
            log.debug("Can't check %s: %s", self.path, e)
            return None
        return str(self.path) if found else None


class ExplicitPath(KnownPath):
    """A path configured by the user, expanded with environment variables."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(os.path.expandvars(str(path)))

    async def probe(self, log: logging.Logger) -> str | None:
        found = await super().probe(log)
        if found is None:
            log.warning("Configured binary %s does not exist, looking elsewhere", self.path)
        return found


def lookup_commands(platform: str = sys.platform, name: str = BINARY_NAME) -> list[str]:
    """Return the shell commands used to look the binary up on `platform`."""
    if platform == "win32":
        return [f"where {name}"]
    return [f"which {name}", f"command -v {name}"]


def known_paths(platform: str = sys.platform, home: Path | None = None) -> list[Path]:
    """Return the well-known install locations for `platform`, in probing order."""
    if platform == "win32":
        profile = Path(os.environ.get("USERPROFILE") or Path.home())
        return [
            Path(r"C:\Program Files\sttr\sttr.exe"),
            Path(r"C:\sttr\sttr.exe"),
            profile / "scoop" / "shims" / "sttr.exe",
        ]
    home = home or Path.home()
    return [
        Path("/usr/local/bin/sttr"),
        Path("/opt/homebrew/bin/sttr"),
        Path("/usr/bin/sttr"),
        home / ".local" / "bin" / "sttr",
        home / "go" / "bin" / "sttr",
        Path("/snap/bin/sttr"),
    ]


def default_probes(platform: str = sys.platform, binary_override: str = "") -> list[ProbeStrategy]:
    """Build the ordered probe list.

    Args:
        platform: value of `sys.platform` to build the list for
        binary_override: a user-configured path, probed first when set
    """
    probes: list[ProbeStrategy] = []
    if binary_override:
        probes.append(ExplicitPath(binary_override))
    probes.extend(ShellLookup(cmd) for cmd in lookup_commands(platform))
    probes.extend(KnownPath(path) for path in known_paths(platform))
    return probes


async def locate(probes: Iterable[ProbeStrategy] | None = None, log: logging.Logger | None = None) -> str | None:
    """Return the path of the sttr binary, or None if it isn't installed."""
    log = log or get_logger("locator")
    for strategy in default_probes() if probes is None else probes:
        path = await strategy.probe(log)
        if path:
            log.debug("sttr found by %r: %s", strategy, path)
            return path
    log.info("sttr binary not found")
    return None
