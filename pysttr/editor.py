"""Presentation layer interface.

The transformations are driven by an editor front-end which provides the
selection, the menus and the notifications. `Editor` describes what the
application needs from it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import TypeVar

__all__ = ["Editor", "QuickPickItem", "Selection"]

T = TypeVar("T")


@dataclass(frozen=True)
class Selection:
    """A selected range of text.

    `start` and `end` are opaque to the application, only the editor interprets them.
    """

    text: str
    start: int = 0
    end: int = 0

    @property
    def is_empty(self) -> bool:
        """Return True if nothing is selected."""
        return not self.text


@dataclass(frozen=True)
class QuickPickItem:
    """A row of the transformation menu."""

    label: str
    description: str = ""
    detail: str = ""
    command: str = ""
    is_separator: bool = False


class Editor(ABC):
    """What the application expects from the editor front-end."""

    @abstractmethod
    def get_selection(self) -> Selection | None:
        """Return the current selection, or None if there is no active editor."""

    @abstractmethod
    async def replace_selection(self, selection: Selection, text: str) -> None:
        """Substitute `text` to the `selection`."""

    @abstractmethod
    async def show_quick_pick(self, items: list[QuickPickItem], placeholder: str = "") -> QuickPickItem | None:
        """Let the user pick one of the non-separator `items`, None if cancelled."""

    @abstractmethod
    async def show_error(self, message: str, *actions: str) -> str | None:
        """Display an error, returns the chosen action if `actions` are offered."""

    @abstractmethod
    async def show_info(self, message: str) -> None:
        """Display an information message."""

    @abstractmethod
    async def open_document(self, content: str, language: str = "markdown") -> None:
        """Show a read-only document."""

    @abstractmethod
    async def open_external(self, url: str) -> None:
        """Open `url` outside of the editor."""

    async def with_progress(self, title: str, task: Awaitable[T]) -> T:
        """Await `task` while showing `title` as a progress indicator."""
        return await task
