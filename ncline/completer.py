# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `NclineCompleter`, the Prompt Toolkit completer for command names.

While the user is typing the first word of a line, Tab offers every registered
command name starting with the typed text. When nothing matches, the whole
catalog is offered. Arguments are not completed.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

if TYPE_CHECKING:
    from ncline.shell import Shell


class NclineCompleter(Completer):
    """
    Prompt Toolkit completer backed by the shell's prefix search.

    Args:
        shell (Shell): The running shell whose registry provides the catalog.
    """

    def __init__(self, shell: "Shell"):
        self.shell = shell

    def get_completions(
        self, document: Document, complete_event: CompleteEvent | None
    ) -> Iterable[Completion]:
        text = document.text_before_cursor
        if any(character.isspace() for character in text):
            return
        for name in self.shell.complete(text):
            yield Completion(name, start_position=-len(text), display=name)
