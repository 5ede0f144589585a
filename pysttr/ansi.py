"""Terminal colors for log records and error messages."""

import os
import sys
from typing import TextIO

__all__ = [
    "BOLD",
    "DIM",
    "RED",
    "RESET",
    "YELLOW",
    "LogStyles",
    "colorize",
    "make_style",
    "should_colorize",
]

_CSI = "\x1b["

RESET = f"{_CSI}0m"

BOLD = "1"
DIM = "2"
RED = "31"
YELLOW = "33"


def should_colorize(stream: TextIO | None = None) -> bool:
    """Tell whether `stream` (stderr by default) accepts escape sequences.

    `NO_COLOR` disables colors and `FORCE_COLOR` enables them, otherwise only terminals get colors.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    target = sys.stderr if stream is None else stream
    isatty = getattr(target, "isatty", None)
    return bool(isatty and isatty())


def _sequence(codes: tuple[str, ...]) -> str:
    return f"{_CSI}{';'.join(codes)}m" if codes else ""


def colorize(text: str, *codes: str) -> str:
    """Wrap `text` in the SGR `codes`, returned unchanged without codes."""
    if not codes:
        return text
    return f"{_sequence(codes)}{text}{RESET}"


def make_style(*codes: str) -> tuple[str, str]:
    """Return the (prefix, suffix) strings to put around a formatted record."""
    return (_sequence(codes), RESET)


class LogStyles:
    """Codes used by the screen log formatter, per level."""

    WARNING = (YELLOW, DIM)
    ERROR = (RED, DIM)
    CRITICAL = (RED, BOLD)
