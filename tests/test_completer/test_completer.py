from types import SimpleNamespace

import pytest
from prompt_toolkit.completion import Completion
from prompt_toolkit.document import Document

from ncline.completer import NclineCompleter
from ncline.registry import CommandRegistry
from ncline.command import CommandModule, ModuleGroup


@pytest.fixture
def fake_shell():
    catalog = ["alpha", "alphaBeta", "beta"]

    def complete(prefix):
        hits = [name for name in catalog if name.startswith(prefix)]
        return hits or list(catalog)

    return SimpleNamespace(complete=complete)


def test_get_completions_prefix(fake_shell):
    completer = NclineCompleter(fake_shell)
    results = list(completer.get_completions(Document("al"), None))
    assert all(isinstance(c, Completion) for c in results)
    assert [c.text for c in results] == ["alpha", "alphaBeta"]
    assert all(c.start_position == -2 for c in results)


def test_get_completions_no_input(fake_shell):
    completer = NclineCompleter(fake_shell)
    results = list(completer.get_completions(Document(""), None))
    assert [c.text for c in results] == ["alpha", "alphaBeta", "beta"]
    assert all(c.start_position == 0 for c in results)


def test_get_completions_no_match_offers_everything(fake_shell):
    completer = NclineCompleter(fake_shell)
    results = list(completer.get_completions(Document("zzz"), None))
    assert [c.text for c in results] == ["alpha", "alphaBeta", "beta"]
    assert all(c.start_position == -3 for c in results)


def test_get_completions_skips_arguments(fake_shell):
    completer = NclineCompleter(fake_shell)
    assert not list(completer.get_completions(Document("alpha al"), None))
    assert not list(completer.get_completions(Document("alpha "), None))


def test_get_completions_with_real_registry(tmp_path):
    from ncline.context import ShellContext
    from ncline.shell import Shell

    registry = CommandRegistry.build(
        [
            ModuleGroup(
                name="core",
                modules=[
                    CommandModule.from_container(
                        "paths", {"target": lambda: None, "set_path_verbose": lambda s: None}
                    )
                ],
            )
        ]
    )
    shell = Shell(registry, ShellContext(data_dir=tmp_path))
    completer = NclineCompleter(shell)

    results = list(completer.get_completions(Document("ta"), None))
    assert [c.text for c in results] == ["target"]
