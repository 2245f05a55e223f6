import asyncio

import pytest
from rich.text import Text

from ncline.cmd_modules.demo.greeter.commands import commands, countdown, echo, greet
from ncline.exceptions import CommandError
from ncline.parser.signature import get_parameter_names


def plain(captured) -> str:
    return Text.from_ansi(captured.out).plain


def test_greeter_exports():
    assert list(commands) == ["greet", "echo", "countdown"]
    assert get_parameter_names(greet) == ["name", "greeting"]


def test_greet(capsys):
    greet("Ada")
    greet("Ada", "Howdy")
    out = plain(capsys.readouterr())
    assert "Hello, Ada!" in out
    assert "Howdy, Ada!" in out


def test_greet_requires_name():
    with pytest.raises(CommandError, match="who to greet"):
        greet(None)


def test_echo(capsys):
    echo("a b", None)
    out = plain(capsys.readouterr())
    assert "[0] 'a b'" in out
    assert "[1] <null>" in out


@pytest.mark.asyncio
async def test_countdown(monkeypatch, capsys):
    async def no_sleep(_):
        pass

    monkeypatch.setattr(asyncio, "sleep", no_sleep)
    await countdown("2")
    out = plain(capsys.readouterr())
    assert "2..." in out
    assert "1..." in out
    assert "Liftoff!" in out


@pytest.mark.asyncio
async def test_countdown_rejects_non_numbers(capsys):
    await countdown("soon")
    assert "ERROR: 'soon' is not a whole number of seconds." in plain(capsys.readouterr())
