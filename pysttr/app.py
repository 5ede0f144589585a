"""Application commands: transform the selection, list and refresh the catalog."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from .commands import format_help
from .config import format_config_help
from .constants import BINARY_NAME, HOMEPAGE_URL
from .editor import QuickPickItem
from .install import install_instructions
from .invoke import run_command
from .locator import locate
from .logging_setup import get_logger
from .models import ExitCode, NotFoundError, SttrError, sorted_catalog

if TYPE_CHECKING:
    from .catalog import CommandCatalog
    from .config import Configuration
    from .editor import Editor, Selection

__all__ = ["ACTION_INSTALL", "ACTION_OPEN_HOMEPAGE", "SttrApp"]

ACTION_INSTALL = "Install Instructions"
ACTION_OPEN_HOMEPAGE = "Open GitHub"

NO_EDITOR_MESSAGE = "No active text editor found."
EMPTY_SELECTION_MESSAGE = "Please select text to transform."


class SttrApp:
    """Glue between the editor, the catalog and the sttr binary."""

    def __init__(self, editor: Editor, catalog: CommandCatalog, config: Configuration, platform: str = sys.platform) -> None:
        self.editor = editor
        self.catalog = catalog
        self.config = config
        self.platform = platform
        self.log = get_logger("app")

    async def initialize(self) -> None:
        """Load the catalog, refreshing it if configured to."""
        await self.catalog.load()
        if self.config.get_bool("refresh_on_start"):
            await self.catalog.refresh()

    # Commands

    async def run_transform_text(self, token: str = "") -> ExitCode:
        """[token] Transform the selection, a menu asks for the transformation when `token` is omitted."""
        selection = self.editor.get_selection()
        if selection is None:
            await self.editor.show_error(NO_EDITOR_MESSAGE)
            return ExitCode.USAGE_ERROR
        if selection.is_empty:
            await self.editor.show_error(EMPTY_SELECTION_MESSAGE)
            return ExitCode.USAGE_ERROR

        if not token:
            picked = await self.editor.show_quick_pick(self.build_menu_items(), "Select a transformation to apply")
            if picked is None or not picked.command:
                self.log.info("transformation cancelled")
                return ExitCode.SUCCESS
            token = picked.command
        elif self.catalog.find(token) is None:
            self.log.info("%s isn't a known command, trying anyway", token)

        return await self.execute(token, selection)

    async def run_show_commands(self) -> ExitCode:
        """Show every available transformation."""
        await self.editor.open_document(self.format_catalog_document(), "markdown")
        return ExitCode.SUCCESS

    async def run_refresh_commands(self) -> ExitCode:
        """Ask sttr for its commands and update the saved list."""
        if await self.editor.with_progress("Refreshing sttr commands", self.catalog.refresh()):
            await self.editor.show_info(f"Loaded {self.catalog.count()} sttr commands in {len(self.catalog.get())} categories")
            return ExitCode.SUCCESS
        await self.editor.show_error("Unable to refresh the sttr commands, the current list is kept.")
        return ExitCode.COMMAND_ERROR

    async def run_install(self) -> ExitCode:
        """Show how to install sttr on this platform."""
        await self.editor.open_document(install_instructions(self.platform), "markdown")
        return ExitCode.SUCCESS

    async def run_help(self, command: str = "") -> ExitCode:
        """[command] Show the available commands, or the documentation of `command`."""
        text = format_help(self, command)
        if not command:
            text += "\n" + format_config_help()
        await self.editor.open_document(text, "plaintext")
        return ExitCode.SUCCESS

    # Utils

    async def require_binary(self) -> str:
        """Return the path of the sttr binary.

        Raises:
            NotFoundError: sttr isn't installed
        """
        binary = await locate(self.catalog.probes_factory(), log=self.log)
        if binary is None:
            raise NotFoundError
        return binary

    async def execute(self, token: str, selection: Selection) -> ExitCode:
        """Run `sttr token` on the selection and substitute the result."""
        try:
            binary = await self.require_binary()
        except NotFoundError as e:
            await self.notify_not_found(e)
            return ExitCode.NOT_FOUND

        try:
            result = await run_command(binary, token, selection.text, log=self.log)
        except SttrError as e:
            await self.editor.show_error(f"Error executing {BINARY_NAME} command: {e}")
            return ExitCode.COMMAND_ERROR

        await self.editor.replace_selection(selection, result)
        await self.editor.show_info(f"Text transformed using: {BINARY_NAME} {token}")
        return ExitCode.SUCCESS

    async def notify_not_found(self, error: NotFoundError) -> None:
        """Report the missing binary and handle the chosen action."""
        action = await self.editor.show_error(str(error), ACTION_INSTALL, ACTION_OPEN_HOMEPAGE)
        if action == ACTION_INSTALL:
            await self.run_install()
        elif action == ACTION_OPEN_HOMEPAGE:
            await self.editor.open_external(HOMEPAGE_URL)

    def build_menu_items(self) -> list[QuickPickItem]:
        """Return the menu rows: a separator per category followed by its commands."""
        items: list[QuickPickItem] = []
        for category, entries in sorted_catalog(self.catalog.get()).items():
            items.append(QuickPickItem(label=category, is_separator=True))
            items.extend(
                QuickPickItem(
                    label=entry.label,
                    description=entry.description,
                    detail=f"{BINARY_NAME} {entry.command}",
                    command=entry.command,
                )
                for entry in entries
            )
        return items

    def format_catalog_document(self) -> str:
        """Return the catalog as a Markdown document."""
        lines = ["# STTR Available Transformations"]
        for category, entries in sorted_catalog(self.catalog.get()).items():
            lines.append("")
            lines.append(f"**{category}:**")
            lines.extend(f"- {entry.label} (`{BINARY_NAME} {entry.command}`) - {entry.description}" for entry in entries)
        return "\n".join(lines) + "\n"
