"""CLI command discovery.

Commands are the `run_*` methods of the application object, their
docstring's first line documents the arguments (`<required>` or `[optional]`)
followed by a short description.
"""

from __future__ import annotations

import inspect
import re
from dataclasses import dataclass

__all__ = [
    "CommandArg",
    "CommandInfo",
    "extract_commands_from_object",
    "format_help",
    "normalize_command_name",
    "parse_docstring",
]

_ARG_PATTERN = re.compile(r"([<\[])([^>\]]+)([>\]])")


@dataclass
class CommandArg:
    """An argument parsed from a command's docstring."""

    value: str
    required: bool  # True for <arg>, False for [arg]


@dataclass
class CommandInfo:
    """Complete information about a command."""

    name: str
    args: list[CommandArg]
    short_description: str
    full_description: str

    @property
    def display_name(self) -> str:
        """Name as typed on the command line."""
        return self.name.replace("_", "-")

    @property
    def usage(self) -> str:
        """Arguments summary, eg: `<token> [path]`."""
        return " ".join(f"<{arg.value}>" if arg.required else f"[{arg.value}]" for arg in self.args)


def normalize_command_name(cmd: str) -> str:
    """Convert a user-typed command to the method suffix.

    E.g., "show-commands" -> "show_commands"
    """
    return cmd.strip().replace("-", "_").replace(" ", "_")


def parse_docstring(docstring: str) -> tuple[list[CommandArg], str, str]:
    """Parse a docstring to extract arguments and descriptions.

    Returns:
        Tuple of (args, short_description, full_description)
    """
    if not docstring:
        return [], "No description available.", ""

    full_description = docstring.strip()
    first_line = full_description.split("\n")[0].strip()

    args: list[CommandArg] = []
    last_end = 0
    for match in _ARG_PATTERN.finditer(first_line):
        if match.start() != last_end and first_line[last_end : match.start()].strip():
            break
        args.append(CommandArg(value=match.group(2), required=match.group(1) == "<"))
        last_end = match.end()
        while last_end < len(first_line) and first_line[last_end] == " ":
            last_end += 1

    short_description = first_line[last_end:].strip() if args else first_line
    return args, short_description or first_line, full_description


def extract_commands_from_object(obj: object) -> dict[str, CommandInfo]:
    """Return the commands provided by the `run_*` methods of `obj`, by name."""
    commands: dict[str, CommandInfo] = {}
    for name in sorted(dir(obj)):
        if not name.startswith("run_"):
            continue
        method = getattr(obj, name)
        if not callable(method):
            continue
        args, short_desc, full_desc = parse_docstring(inspect.getdoc(method) or "")
        commands[name[4:]] = CommandInfo(
            name=name[4:],
            args=args,
            short_description=short_desc,
            full_description=full_desc,
        )
    return commands


def format_help(obj: object, command: str = "") -> str:
    """Return the help of every command, or the full documentation of `command`."""
    commands = extract_commands_from_object(obj)
    if command:
        info = commands.get(normalize_command_name(command))
        if info is None:
            return f"Unknown command: {command}\nRun 'pysttr help' for available commands.\n"
        return f"pysttr {info.display_name} {info.usage}".rstrip() + f"\n\n{info.full_description}\n"

    lines = [
        "Syntax: pysttr [--config FILE] [--debug LOGFILE] [--file PATH [--lines A:B]] [--engine NAME] <command> [args]",
        "",
        "The text to transform is read from PATH (or the lines A to B of it) or from the standard input.",
        "",
        "Available commands:",
    ]
    for info in commands.values():
        lines.append(f"  {(info.display_name + ' ' + info.usage).strip():28s} {info.short_description}")
    return "\n".join(lines) + "\n"
