"""Run the sttr binary."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from .constants import HELP_FLAG
from .logging_setup import get_logger
from .models import ExecutionError, SpawnError

if TYPE_CHECKING:
    import logging

__all__ = ["read_help", "run_command"]


async def run_command(binary: str, token: str, input_text: str, log: logging.Logger | None = None) -> str:
    """Run `binary token`, feeding `input_text` on stdin.

    stdout and stderr are collected concurrently until the process exits,
    there is no timeout.

    Args:
        binary: path of the sttr executable
        token: the command token, passed as the sole argument
        input_text: text written to stdin before closing it
        log: logger to use

    Returns:
        The standard output, trailing whitespace removed

    Raises:
        SpawnError: the process couldn't be started
        ExecutionError: the process exited with a non-zero code
    """
    log = log or get_logger("invoke")
    log.debug("Running %s %s", binary, token)
    try:
        proc = await asyncio.create_subprocess_exec(
            binary,
            token,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        log.error("Unable to start %s: %s", binary, e)
        raise SpawnError(binary, e) from e

    stdout, stderr = await proc.communicate(input_text.encode())
    exit_code = proc.returncode if proc.returncode is not None else -1
    if exit_code != 0:
        error_text = stderr.decode(errors="replace").strip()
        log.warning("%s %s exited with code %d: %s", binary, token, exit_code, error_text)
        raise ExecutionError(exit_code, error_text)
    return stdout.decode(errors="replace").rstrip()


async def read_help(binary: str, log: logging.Logger | None = None) -> str:
    """Return the help output of `binary`."""
    return await run_command(binary, HELP_FLAG, "", log=log)
