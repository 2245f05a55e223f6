import asyncio

import pytest
from rich.text import Text

from ncline.command import CommandModule, ModuleGroup
from ncline.context import DEFAULT_PROMPT, ShellContext
from ncline.exceptions import CommandError
from ncline.output import throw_error
from ncline.registry import CommandRegistry
from ncline.shell import Shell
from ncline.signals import QuitSignal


def plain(captured) -> str:
    return Text.from_ansi(captured.out).plain


class RecordingWatcher:
    def __init__(self, name, closed, fail=False):
        self.name = name
        self.closed = closed
        self.fail = fail

    def close(self):
        if self.fail:
            raise OSError(f"{self.name} is stuck")
        self.closed.append(self.name)


@pytest.fixture
def calls():
    return []


@pytest.fixture
def shell(tmp_path, calls):
    def create_alias(alias, filepath):
        calls.append(("create_alias", alias, filepath))
        return alias

    def explode():
        raise ValueError("boom")

    def refuse(reason):
        throw_error(f"Refused: {reason}")

    def silent_failure():
        raise CommandError()

    def show():
        calls.append(("show",))

    def leave():
        raise QuitSignal()

    async def later(value):
        await asyncio.sleep(0)
        calls.append(("later", value))
        return value

    async def later_failure():
        raise ValueError("late boom")

    commands = {
        "create_alias": create_alias,
        "explode": explode,
        "refuse": refuse,
        "silent_failure": silent_failure,
        "show": show,
        "leave": leave,
        "later": later,
        "later_failure": later_failure,
    }
    registry = CommandRegistry.build(
        [
            ModuleGroup(
                name="core",
                modules=[CommandModule.from_container("test", commands, path="core/test")],
            )
        ]
    )
    return Shell(registry, ShellContext(data_dir=tmp_path))


# --- split_line ---
@pytest.mark.parametrize(
    "line, expected",
    [
        ("show", ("show", "")),
        ("create_alias docs /tmp", ("create_alias", "docs /tmp")),
        ("create_alias  docs", ("create_alias", " docs")),
        ("", ("", "")),
    ],
)
def test_split_line(line, expected):
    assert Shell.split_line(line) == expected


# --- dispatch ---
def test_dispatch_runs_command_with_positional_arguments(shell, calls):
    assert shell.dispatch('create_alias docs "/tmp/my docs"') == "docs"
    assert calls == [("create_alias", "docs", "/tmp/my docs")]


def test_dispatch_runs_command_with_named_arguments(shell, calls):
    shell.dispatch("create_alias [filepath:C:\\temp alias:tmp]")
    assert calls == [("create_alias", "tmp", "C:\\temp")]


def test_dispatch_without_arguments_pads_required_parameters(shell, calls):
    shell.dispatch("create_alias")
    assert calls == [("create_alias", None, None)]


def test_dispatch_unknown_command(shell, capsys):
    assert shell.dispatch("nope arg") is None
    assert "'nope' is not a recognized command." in plain(capsys.readouterr())


def test_dispatch_empty_line_prints_nothing(shell, capsys):
    assert shell.dispatch("") is None
    assert plain(capsys.readouterr()) == ""


def test_dispatch_uncaught_error_is_isolated(shell, calls, capsys):
    assert shell.dispatch("explode") is None
    assert "An uncaught error occurred with command 'explode'." in plain(capsys.readouterr())

    shell.dispatch("show")
    assert calls == [("show",)]


def test_dispatch_command_error_prints_only_its_message(shell, calls, capsys):
    shell.dispatch("refuse tired")
    out = plain(capsys.readouterr())
    assert "Refused: tired" in out
    assert "uncaught" not in out

    shell.dispatch("show")
    assert calls == [("show",)]


def test_dispatch_command_error_without_message_is_generic(shell, capsys):
    shell.dispatch("silent_failure")
    assert (
        "An uncaught error occurred with command 'silent_failure'."
        in plain(capsys.readouterr())
    )


def test_dispatch_surplus_arguments_report_usage(shell, capsys):
    shell.dispatch("show one two")
    assert "show()" in plain(capsys.readouterr())


def test_dispatch_lets_quit_signal_through(shell):
    with pytest.raises(QuitSignal):
        shell.dispatch("leave")


def test_prompt_is_refreshed_after_every_line(shell):
    prompts = iter(["first >> ", "second >> ", "third >> ", "fourth >> "])
    shell.context.set_prompt_provider(lambda: next(prompts))

    shell.dispatch("show")
    assert shell.prompt_text == "first >> "
    shell.dispatch("explode")
    assert shell.prompt_text == "second >> "
    shell.dispatch("unknown")
    assert shell.prompt_text == "third >> "


def test_failing_prompt_provider_falls_back_to_default(shell):
    def broken():
        raise RuntimeError("no prompt")

    shell.context.set_prompt_provider(broken)
    shell.dispatch("show")
    assert shell.prompt_text == DEFAULT_PROMPT


def test_complete_delegates_to_registry(shell):
    assert shell.complete("cre") == ["create_alias"]
    assert shell.complete("xyz") == shell.registry.catalog


# --- process_line ---
@pytest.mark.asyncio
async def test_process_line_schedules_awaitable_result(shell, calls):
    task = await shell.process_line("later 5")
    assert isinstance(task, asyncio.Future)
    assert await task == "5"
    assert calls == [("later", "5")]


@pytest.mark.asyncio
async def test_background_failure_is_reported(shell, capsys):
    task = await shell.process_line("later_failure")
    with pytest.raises(ValueError):
        await task
    await asyncio.sleep(0)
    assert (
        "An uncaught error occurred with command 'later_failure'."
        in plain(capsys.readouterr())
    )


@pytest.mark.asyncio
async def test_process_line_returns_plain_results(shell):
    assert await shell.process_line("create_alias a b") == "a"


# --- shutdown ---
def test_shutdown_closes_watchers_in_order_despite_failures(shell, capsys):
    closed = []
    watchers = shell.context.watchers
    watchers.register(RecordingWatcher("first", closed))
    watchers.register(RecordingWatcher("broken", closed, fail=True))
    watchers.register(RecordingWatcher("third", closed))

    shell.shutdown()

    assert closed == ["first", "third"]
    assert len(watchers) == 0
    out = plain(capsys.readouterr())
    assert "WARN: 1 watcher(s) failed to close." in out
    assert "Exiting..." in out


def test_shutdown_is_idempotent(shell, capsys):
    closed = []
    shell.context.watchers.register(RecordingWatcher("only", closed))
    shell.shutdown()
    shell.shutdown()
    assert closed == ["only"]
    assert plain(capsys.readouterr()).count("Exiting...") == 1


def test_report_collisions(tmp_path, capsys):
    module_a = CommandModule.from_container("a", {"dup": lambda: 1})
    module_b = CommandModule.from_container("b", {"dup": lambda: 2})
    registry = CommandRegistry.build([ModuleGroup(name="core", modules=[module_a, module_b])])
    shell = Shell(registry, ShellContext(data_dir=tmp_path))

    shell.report_collisions()

    assert (
        "WARNING: Command 'dup' is defined more than once, last command defined wins."
        in plain(capsys.readouterr())
    )
