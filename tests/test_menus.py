"""Tests for the menu engines."""

import pytest

from pysttr.adapters import menus
from pysttr.adapters.menus import FzfMenu, MenuEngine, MenuError, QuestionaryMenu, RofiMenu, apply_variables


def test_apply_variables():
    assert apply_variables("rofi -p '[prompt]'", {"prompt": "Pick:  "}) == "rofi -p 'Pick:  '"
    assert apply_variables("keep [unknown]", {}) == "keep [unknown]"


def test_init_forced_engine():
    engine = menus.init("rofi", "-dmenu")
    assert isinstance(engine, RofiMenu)
    assert engine.proc_extra_parameters == "-dmenu"


def test_init_custom_engine():
    engine = menus.init("my-picker --flag")
    assert type(engine) is MenuEngine
    assert engine.proc_name == "my-picker --flag"


def test_init_first_available(monkeypatch):
    monkeypatch.setattr(QuestionaryMenu, "is_available", classmethod(lambda cls: False))
    monkeypatch.setattr(menus.shutil, "which", lambda name: "/usr/bin/fzf" if name == "fzf" else None)
    assert isinstance(menus.init(), FzfMenu)


def test_init_nothing_available(monkeypatch):
    monkeypatch.setattr(QuestionaryMenu, "is_available", classmethod(lambda cls: False))
    monkeypatch.setattr(menus.shutil, "which", lambda name: None)
    with pytest.raises(MenuError):
        menus.init()


@pytest.mark.asyncio
async def test_run_custom_engine():
    engine = menus.init("head", "-n 1")
    assert await engine.run(["first", "second"], "Pick") == "first"


@pytest.mark.asyncio
async def test_run_without_choices():
    engine = menus.init("head", "-n 1")
    assert await engine.run([]) == ""


@pytest.mark.asyncio
async def test_questionary_only_separators():
    assert await QuestionaryMenu().run(["── Hash ──"], headers=["── Hash ──"]) == ""


@pytest.mark.asyncio
async def test_questionary_run(mocker):
    question = mocker.Mock()
    question.ask_async = mocker.AsyncMock(return_value="MD5")
    select = mocker.patch("pysttr.adapters.menus.questionary.select", return_value=question)
    assert await QuestionaryMenu().run(["── Hash ──", "MD5"], "Pick", ["── Hash ──"]) == "MD5"
    choices = select.call_args.kwargs["choices"]
    assert choices[1] == "MD5"
    assert not isinstance(choices[0], str)
