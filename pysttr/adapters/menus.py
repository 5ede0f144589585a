"""Menu engine adapter."""

import asyncio
import re
import shutil
import sys
from collections.abc import Iterable

import questionary

from ..logging_setup import get_logger
from ..models import SttrError

__all__ = ["MenuEngine", "MenuError", "QuestionaryMenu", "every_menu_engine", "init"]


class MenuError(SttrError):
    """No usable menu engine."""


def apply_variables(template: str, variables: dict[str, str]) -> str:
    """Replace [var_name] with content from supplied variables."""

    def replace(match: re.Match[str]) -> str:
        return variables.get(match.group(1), match.group(0))

    return re.sub(r"\[([^\[\]]+)\]", replace, template)


class MenuEngine:
    """Menu backend interface."""

    proc_name: str
    " process name for this engine "
    proc_extra_parameters: str = ""
    " process parameters to use for this engine "

    def __init__(self, extra_parameters: str = "") -> None:
        """Initialize the engine with extra parameters.

        Args:
            extra_parameters: extra parameters to pass to the program
        """
        if extra_parameters:
            self.proc_extra_parameters = extra_parameters
        self.log = get_logger("menus")

    @classmethod
    def is_available(cls) -> bool:
        """Check engine availability."""
        return shutil.which(cls.proc_name) is not None

    async def run(self, choices: Iterable[str], prompt: str = "", headers: Iterable[str] = ()) -> str:
        """Run the engine and get the response for the proposed `choices`.

        Args:
            choices: options to chose from, in display order
            prompt: prompt replacement variable (passed in `apply_variables`)
            headers: elements of `choices` which are only section titles

        Returns:
            The choice which have been selected by the user, or an empty string
        """
        menu_text = "\n".join(choices)
        if not menu_text.strip():
            return ""
        command = apply_variables(
            f"{self.proc_name} {self.proc_extra_parameters}",
            {"prompt": f"{prompt}:  "} if prompt else {"prompt": ""},
        )
        self.log.debug(command)
        proc = await asyncio.create_subprocess_shell(
            command,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
        )
        stdout, _ = await proc.communicate(menu_text.encode())
        return stdout.decode().strip()


class FzfMenu(MenuEngine):
    """A fzf based menu, running in the terminal."""

    proc_name = "fzf"
    proc_extra_parameters = "--no-sort --prompt '[prompt]'"


class TofiMenu(MenuEngine):
    """A tofi based menu."""

    proc_name = "tofi"
    proc_extra_parameters = "--prompt-text '[prompt]'"


class RofiMenu(MenuEngine):
    """A rofi based menu."""

    proc_name = "rofi"
    proc_extra_parameters = "-dmenu -matching fuzzy -i -p '[prompt]'"


class WofiMenu(MenuEngine):
    """A wofi based menu."""

    proc_name = "wofi"
    proc_extra_parameters = "-dmenu -i -p '[prompt]'"


class DmenuMenu(MenuEngine):
    """A dmenu based menu."""

    proc_name = "dmenu"
    proc_extra_parameters = "-i"


class BemenuMenu(MenuEngine):
    """A bemenu based menu."""

    proc_name = "bemenu"
    proc_extra_parameters = "-c"


class QuestionaryMenu(MenuEngine):
    """An interactive prompt on the terminal, requires stdin to be a TTY."""

    proc_name = "questionary"

    @classmethod
    def is_available(cls) -> bool:
        return sys.stdin.isatty()

    async def run(self, choices: Iterable[str], prompt: str = "", headers: Iterable[str] = ()) -> str:
        header_set = set(headers)
        q_choices: list[str | questionary.Separator] = [
            questionary.Separator(choice) if choice in header_set else choice for choice in choices
        ]
        if not any(isinstance(choice, str) for choice in q_choices):
            return ""
        result = await questionary.select(prompt or "Select", choices=q_choices).ask_async()
        return result or ""


every_menu_engine: list[type[MenuEngine]] = [QuestionaryMenu, FzfMenu, RofiMenu, WofiMenu, TofiMenu, BemenuMenu, DmenuMenu]


def init(force_engine: str | None = None, extra_parameters: str = "") -> MenuEngine:
    """Return the forced engine, or the first available one.

    Raises:
        MenuError: no engine is available
    """
    if force_engine:
        for engine in every_menu_engine:
            if engine.proc_name == force_engine:
                return engine(extra_parameters)
        # Attempt to use the user-supplied command
        custom = MenuEngine(extra_parameters)
        custom.proc_name = force_engine
        return custom

    for engine in every_menu_engine:
        if engine.is_available():
            return engine(extra_parameters)

    msg = "No menu engine found, install fzf or rofi, or pass the command token"
    raise MenuError(msg)
