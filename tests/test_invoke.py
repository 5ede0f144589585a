"""Tests for the invocation adapter, using a fake sttr script."""

import pytest

from pysttr.invoke import read_help, run_command
from pysttr.models import ExecutionError, SpawnError

from .testtools import SAMPLE_HELP, make_script


@pytest.mark.asyncio
async def test_run_command_success(fake_sttr):
    assert await run_command(str(fake_sttr), "upper", "hello world") == "HELLO WORLD"


@pytest.mark.asyncio
async def test_run_command_token_is_the_sole_argument(fake_sttr):
    # the script prints its first argument followed by blank lines
    assert await run_command(str(fake_sttr), "echo-arg", "ignored") == "echo-arg"


@pytest.mark.asyncio
async def test_run_command_keeps_leading_whitespace(tmp_path):
    script = make_script(tmp_path / "cat", "cat\n")
    assert await run_command(str(script), "any", "  indented\n\n") == "  indented"


@pytest.mark.asyncio
async def test_run_command_large_input(tmp_path):
    script = make_script(tmp_path / "cat", "cat\n")
    text = "line\n" * 100_000
    assert await run_command(str(script), "any", text) == text.rstrip()


@pytest.mark.asyncio
async def test_run_command_failure(fake_sttr):
    with pytest.raises(ExecutionError) as exc_info:
        await run_command(str(fake_sttr), "fail", "hello")
    assert exc_info.value.exit_code == 2
    assert exc_info.value.stderr == "bad input"
    assert str(exc_info.value) == "sttr command failed (exit code 2): bad input"


@pytest.mark.asyncio
async def test_run_command_missing_binary(tmp_path):
    with pytest.raises(SpawnError) as exc_info:
        await run_command(str(tmp_path / "vanished"), "upper", "hello")
    assert isinstance(exc_info.value.cause, FileNotFoundError)


@pytest.mark.asyncio
async def test_run_command_not_executable(tmp_path):
    binary = tmp_path / "sttr"
    binary.write_text("#!/bin/sh\n")
    binary.chmod(0o644)
    with pytest.raises(SpawnError):
        await run_command(str(binary), "upper", "hello")


@pytest.mark.asyncio
async def test_read_help(fake_sttr):
    assert await read_help(str(fake_sttr)) == SAMPLE_HELP.rstrip()
