"""pysttr - command line entry point."""

from __future__ import annotations

import asyncio
import inspect
import sys
from functools import partial
from pathlib import Path

from .adapters.terminal import TerminalEditor, parse_line_range
from .app import SttrApp
from .catalog import CommandCatalog
from .commands import extract_commands_from_object, normalize_command_name
from .config import load_config
from .locator import default_probes
from .logging_setup import get_logger, init_logger
from .models import ExitCode, SttrError
from .storage import SnapshotStore

__all__ = ["main", "run"]

# Short forms accepted on the command line
ALIASES = {
    "transform": "transform_text",
    "commands": "show_commands",
    "list": "show_commands",
    "refresh": "refresh_commands",
}


def use_param(argv: list[str], txt: str) -> str:
    """Check if parameter `txt` is in `argv`.

    if found, removes it from `argv` & returns the argument value
    """
    v = ""
    if txt in argv:
        i = argv.index(txt)
        if i + 1 >= len(argv):
            msg = f"{txt} requires a value"
            raise SttrError(msg)
        v = argv[i + 1]
        del argv[i : i + 2]
    return v


def build_app(argv: list[str]) -> SttrApp:
    """Create the application from the options found in `argv` (consumed)."""
    log = get_logger()
    config = load_config(log, use_param(argv, "--config") or None)

    file_param = use_param(argv, "--file")
    lines_param = use_param(argv, "--lines")
    try:
        lines = parse_line_range(lines_param) if lines_param else None
    except ValueError as e:
        raise SttrError(str(e)) from e
    if lines and not file_param:
        msg = "--lines requires --file"
        raise SttrError(msg)

    editor = TerminalEditor(
        path=Path(file_param).expanduser() if file_param else None,
        lines=lines,
        engine=use_param(argv, "--engine") or config.get_str("engine"),
        engine_parameters=config.get_str("parameters"),
    )
    store = SnapshotStore(config.get_path("state_file"))
    catalog = CommandCatalog(store, probes_factory=partial(default_probes, sys.platform, config.get_str("binary")))
    return SttrApp(editor, catalog, config)


async def run(argv: list[str]) -> ExitCode:
    """Run the command described by `argv` (without the program name)."""
    log = get_logger()
    app = build_app(argv)

    if not argv or argv[0] in {"-h", "--help"}:
        argv = ["help", *argv[1:]]
    name = normalize_command_name(argv[0])
    name = ALIASES.get(name, name)
    if name not in extract_commands_from_object(app):
        log.error("Unknown command: %s", argv[0])
        await app.run_help()
        return ExitCode.USAGE_ERROR

    handler = getattr(app, f"run_{name}")
    args = argv[1:]
    try:
        inspect.signature(handler).bind(*args)
    except TypeError:
        log.error("Invalid arguments for %s: %s", argv[0], " ".join(args))
        await app.run_help(name)
        return ExitCode.USAGE_ERROR

    if name != "help":
        await app.initialize()
    return await handler(*args)


def main() -> None:
    """Run the command."""
    argv = sys.argv[1:]
    try:
        debug_flag = use_param(argv, "--debug")
    except SttrError as e:
        print(e, file=sys.stderr)
        sys.exit(ExitCode.USAGE_ERROR)
    if debug_flag:
        init_logger(filename=debug_flag, force_debug=True)
    else:
        init_logger()
    log = get_logger("startup")

    try:
        code = asyncio.run(run(argv))
    except KeyboardInterrupt:
        code = ExitCode.USAGE_ERROR
    except SttrError as e:
        log.critical("%s", e)
        code = ExitCode.USAGE_ERROR
    except Exception:  # pylint: disable=W0718
        log.critical("Unhandled exception:", exc_info=True)
        code = ExitCode.COMMAND_ERROR
    sys.exit(code)


if __name__ == "__main__":
    main()
