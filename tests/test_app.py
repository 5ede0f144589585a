"""Tests for the application commands, with a fake editor and a fake sttr."""

import pytest

from pysttr.app import ACTION_INSTALL, ACTION_OPEN_HOMEPAGE, SttrApp
from pysttr.config import Configuration
from pysttr.constants import HOMEPAGE_URL
from pysttr.editor import Selection
from pysttr.logging_setup import get_logger
from pysttr.models import CommandEntry, ExitCode, NotFoundError
from pysttr.parsing import parse_help

from .testtools import SAMPLE_HELP, FakeEditor


def make_app(editor, catalog, **config):
    return SttrApp(editor, catalog, Configuration(config, logger=get_logger("tests")), platform="linux")


@pytest.mark.asyncio
async def test_transform_with_menu(catalog):
    selection = Selection("hello world", 0, 11)
    editor = FakeEditor(selection, pick="upper")
    app = make_app(editor, catalog)
    await app.initialize()

    assert await app.run_transform_text() == ExitCode.SUCCESS
    assert editor.replaced == [(selection, "HELLO WORLD")]
    assert editor.infos == ["Text transformed using: sttr upper"]
    assert editor.errors == []


@pytest.mark.asyncio
async def test_transform_with_token_skips_menu(catalog):
    editor = FakeEditor(Selection("abc"))
    app = make_app(editor, catalog)
    await app.initialize()

    assert await app.run_transform_text("upper") == ExitCode.SUCCESS
    assert editor.menus == []
    assert editor.replaced[0][1] == "ABC"


@pytest.mark.asyncio
async def test_transform_failure_leaves_selection(catalog):
    editor = FakeEditor(Selection("hello"))
    app = make_app(editor, catalog)
    await app.initialize()

    assert await app.run_transform_text("fail") == ExitCode.COMMAND_ERROR
    assert editor.replaced == []
    assert len(editor.errors) == 1
    message, actions = editor.errors[0]
    assert "exit code 2" in message
    assert "bad input" in message
    assert actions == ()


@pytest.mark.asyncio
async def test_transform_binary_not_found(missing_catalog, mocker):
    run_command = mocker.patch("pysttr.app.run_command")
    editor = FakeEditor(Selection("hello world"), pick="upper")
    app = make_app(editor, missing_catalog)
    await app.initialize()

    assert await app.run_transform_text() == ExitCode.NOT_FOUND
    message, actions = editor.errors[0]
    assert "STTR binary not found" in message
    assert actions == (ACTION_INSTALL, ACTION_OPEN_HOMEPAGE)
    run_command.assert_not_called()
    assert editor.replaced == []
    assert editor.documents == []
    assert editor.opened == []


@pytest.mark.asyncio
async def test_not_found_install_action(missing_catalog):
    editor = FakeEditor(Selection("hello"), action=ACTION_INSTALL)
    app = make_app(editor, missing_catalog)
    await app.initialize()

    await app.run_transform_text("upper")
    content, language = editor.documents[0]
    assert language == "markdown"
    assert content.startswith("# Install STTR on Linux")


@pytest.mark.asyncio
async def test_not_found_homepage_action(missing_catalog):
    editor = FakeEditor(Selection("hello"), action=ACTION_OPEN_HOMEPAGE)
    app = make_app(editor, missing_catalog)
    await app.initialize()

    await app.run_transform_text("upper")
    assert editor.opened == [HOMEPAGE_URL]


@pytest.mark.asyncio
async def test_no_active_editor(catalog):
    editor = FakeEditor(None)
    app = make_app(editor, catalog)
    assert await app.run_transform_text() == ExitCode.USAGE_ERROR
    assert editor.errors == [("No active text editor found.", ())]


@pytest.mark.asyncio
async def test_empty_selection(catalog):
    editor = FakeEditor(Selection(""))
    app = make_app(editor, catalog)
    assert await app.run_transform_text() == ExitCode.USAGE_ERROR
    assert editor.errors == [("Please select text to transform.", ())]
    assert editor.menus == []


@pytest.mark.asyncio
async def test_menu_cancelled(catalog, mocker):
    run_command = mocker.patch("pysttr.app.run_command")
    editor = FakeEditor(Selection("hello"), pick=None)
    app = make_app(editor, catalog)
    await app.initialize()

    assert await app.run_transform_text() == ExitCode.SUCCESS
    run_command.assert_not_called()
    assert editor.replaced == []


@pytest.mark.asyncio
async def test_menu_items(catalog):
    app = make_app(FakeEditor(), catalog)
    catalog._catalog = {
        "String Case": [CommandEntry("Upper", "upper", "To upper"), CommandEntry("camelCase", "camel", "To camel")],
        "Hash": [CommandEntry("MD5", "md5", "Generate MD5 hash")],
    }
    items = app.build_menu_items()
    assert [(item.label, item.is_separator) for item in items] == [
        ("String Case", True),
        ("camelCase", False),
        ("Upper", False),
        ("Hash", True),
        ("MD5", False),
    ]
    assert items[1].detail == "sttr camel"
    assert items[1].description == "To camel"
    assert items[1].command == "camel"


@pytest.mark.asyncio
async def test_show_commands(catalog):
    editor = FakeEditor()
    app = make_app(editor, catalog)
    await app.initialize()

    assert await app.run_show_commands() == ExitCode.SUCCESS
    content, language = editor.documents[0]
    assert language == "markdown"
    assert content.startswith("# STTR Available Transformations\n")
    assert "**Encode/Decode:**" in content
    assert "- MD5 (`sttr md5`) - Generate MD5 hash" in content


@pytest.mark.asyncio
async def test_refresh_commands(catalog):
    editor = FakeEditor()
    app = make_app(editor, catalog)
    await app.initialize()

    assert await app.run_refresh_commands() == ExitCode.SUCCESS
    assert editor.progress == ["Refreshing sttr commands"]
    assert editor.infos == ["Loaded 8 sttr commands in 6 categories"]
    assert catalog.get() == parse_help(SAMPLE_HELP)


@pytest.mark.asyncio
async def test_refresh_commands_failure(missing_catalog):
    editor = FakeEditor()
    app = make_app(editor, missing_catalog)
    await app.initialize()
    before = missing_catalog.get()

    assert await app.run_refresh_commands() == ExitCode.COMMAND_ERROR
    assert len(editor.errors) == 1
    assert missing_catalog.get() is before


@pytest.mark.asyncio
async def test_menu_is_a_snapshot(catalog):
    editor = FakeEditor()
    app = make_app(editor, catalog)
    await app.initialize()
    items = app.build_menu_items()
    await catalog.refresh()
    assert len(items) != len(app.build_menu_items())


@pytest.mark.asyncio
async def test_refresh_on_start(catalog):
    app = make_app(FakeEditor(), catalog, refresh_on_start=True)
    await app.initialize()
    assert catalog.get() == parse_help(SAMPLE_HELP)


@pytest.mark.asyncio
async def test_help(catalog):
    editor = FakeEditor()
    app = make_app(editor, catalog)
    assert await app.run_help() == ExitCode.SUCCESS
    content, _ = editor.documents[0]
    assert "transform-text [token]" in content
    assert "refresh-commands" in content
    assert "refresh_on_start" in content
    assert "Query sttr for its commands on every start" in content


@pytest.mark.asyncio
async def test_help_single_command_has_no_options(catalog):
    editor = FakeEditor()
    app = make_app(editor, catalog)
    await app.run_help("install")
    content, _ = editor.documents[0]
    assert content.startswith("pysttr install")
    assert "refresh_on_start" not in content


@pytest.mark.asyncio
async def test_require_binary(catalog, missing_catalog, fake_sttr):
    assert await make_app(FakeEditor(), catalog).require_binary() == str(fake_sttr)
    with pytest.raises(NotFoundError, match="STTR binary not found"):
        await make_app(FakeEditor(), missing_catalog).require_binary()
