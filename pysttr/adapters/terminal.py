"""Command-line front-end.

The "selection" is a file, a range of lines of a file, or the standard
input. The transformed text replaces it in the file, or is printed on the
standard output, making `pysttr` usable as an editor filter::

    :'<,'>!pysttr transform upper
"""

from __future__ import annotations

import asyncio
import sys
import webbrowser
from collections.abc import Awaitable
from pathlib import Path
from typing import TYPE_CHECKING, TextIO, TypeVar

from ..ansi import BOLD, RED, colorize, should_colorize
from ..editor import Editor, QuickPickItem, Selection
from ..logging_setup import get_logger
from . import menus

if TYPE_CHECKING:
    from .menus import MenuEngine

__all__ = ["TerminalEditor", "parse_line_range"]

T = TypeVar("T")


def parse_line_range(value: str) -> tuple[int, int]:
    """Parse a 1-based inclusive `A:B` line range (`A` alone selects one line).

    Raises:
        ValueError: the range is malformed
    """
    first, _, last = value.partition(":")
    start = int(first)
    end = int(last) if last else start
    if start < 1 or end < start:
        msg = f"Invalid line range: {value}"
        raise ValueError(msg)
    return start, end


class TerminalEditor(Editor):
    """Editor front-end working on a file or on stdin/stdout."""

    def __init__(
        self,
        path: Path | None = None,
        lines: tuple[int, int] | None = None,
        engine: str = "",
        engine_parameters: str = "",
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        """Initialize the front-end.

        Args:
            path: file holding the text, stdin is used when not set
            lines: restrict the selection to this 1-based inclusive line range of `path`
            engine: menu engine to use, auto-detected when empty
            engine_parameters: extra parameters for the menu engine
            stdin: replaces sys.stdin
            stdout: replaces sys.stdout
            stderr: replaces sys.stderr
        """
        self.path = path
        self.lines = lines
        self.engine = engine
        self.engine_parameters = engine_parameters
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.log = get_logger("terminal")
        self._menu: MenuEngine | None = None
        self._content = ""

    @property
    def document_stream(self) -> TextIO:
        """Where documents are written: stdout, unless it receives the transformed text."""
        return self.stdout if self.path else self.stderr

    def get_menu(self) -> MenuEngine:
        """Return the menu engine, initializing it on first use."""
        if self._menu is None:
            self._menu = menus.init(self.engine or None, self.engine_parameters)
            self.log.info("Using %s menu engine", self._menu.proc_name)
        return self._menu

    def get_selection(self) -> Selection | None:
        if self.path is None:
            if self.stdin.isatty():
                return None
            try:
                self._content = self.stdin.read()
            except UnicodeDecodeError as e:
                self.log.error("Unable to decode the standard input: %s", e)
                return None
            return Selection(self._content, 0, len(self._content))

        try:
            # newline="" keeps the line endings of the file untouched
            with self.path.open(encoding="utf-8", newline="") as f:
                self._content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            self.log.error("Unable to read %s: %s", self.path, e)
            return None
        if self.lines is None:
            return Selection(self._content, 0, len(self._content))

        # only "\n" ends a line, a "\r" before it stays part of the line
        lengths = [len(line) + 1 for line in self._content.split("\n")]
        first, last = self.lines
        start = min(sum(lengths[: first - 1]), len(self._content))
        end = min(start + sum(lengths[first - 1 : last]), len(self._content))
        return Selection(self._content[start:end], start, end)

    async def replace_selection(self, selection: Selection, text: str) -> None:
        newline = "\r\n" if selection.text.endswith("\r\n") else "\n"
        if newline == "\r\n" and "\r\n" not in text:
            text = text.replace("\n", "\r\n")
        if selection.text.endswith("\n") and not text.endswith("\n"):
            text += newline
        if self.path is None:
            self.stdout.write(text)
            self.stdout.flush()
            return
        self._content = self._content[: selection.start] + text + self._content[selection.end :]
        with self.path.open("w", encoding="utf-8", newline="") as f:
            f.write(self._content)

    async def show_quick_pick(self, items: list[QuickPickItem], placeholder: str = "") -> QuickPickItem | None:
        try:
            menu = self.get_menu()
        except menus.MenuError as e:
            await self.show_error(str(e))
            return None

        rows: dict[str, QuickPickItem] = {}
        headers: list[str] = []
        for item in items:
            if item.is_separator:
                title = f"── {item.label} ──"
                headers.append(title)
                rows[title] = item
            else:
                rows[f"{item.label}  ·  {item.description}  [{item.detail}]"] = item
        choice = await menu.run(rows, placeholder, headers)
        picked = rows.get(choice)
        if picked is None or picked.is_separator:
            return None
        return picked

    async def show_error(self, message: str, *actions: str) -> str | None:
        self.log.debug("error: %s", message)
        styled = colorize(message, RED, BOLD) if should_colorize(self.stderr) else message
        print(styled, file=self.stderr)
        if not actions or not self.stderr.isatty():
            return None
        try:
            choice = await self.get_menu().run(actions, "Choose an action")
        except menus.MenuError:
            return None
        return choice if choice in actions else None

    async def show_info(self, message: str) -> None:
        self.log.debug("info: %s", message)
        print(message, file=self.stderr)

    async def open_document(self, content: str, language: str = "markdown") -> None:
        self.document_stream.write(content)
        self.document_stream.flush()

    async def open_external(self, url: str) -> None:
        if not await asyncio.to_thread(webbrowser.open, url):
            print(f"Open {url} in your browser", file=self.stderr)

    async def with_progress(self, title: str, task: Awaitable[T]) -> T:
        print(f"{title}...", file=self.stderr)
        return await task
