# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The ncline dispatch loop.

`Shell` reads one line at a time, resolves the command name against the
`CommandRegistry`, parses the argument string and invokes the command. Each
line is handled to completion before the next prompt is shown.

Error isolation:
- An unknown command name prints a notice. An empty line prints nothing.
- A `CommandError` carrying a message prints only that message.
- Any other exception prints a generic notice naming the command. The
  traceback goes to the log.
- Flow signals (`QuitSignal`) are not caught here and end the loop.

After every line the prompt text is regenerated. Ctrl-C, Ctrl-D or the `exit`
command shut the shell down, which closes all registered watchers.
"""
from __future__ import annotations

import asyncio
import inspect
import re
from functools import cached_property, partial
from pathlib import Path
from typing import Any

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.history import FileHistory
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.patch_stdout import patch_stdout
from prompt_toolkit.shortcuts import CompleteStyle
from rich.console import Console
from rich.markup import escape

from ncline import output
from ncline.command import CommandDescriptor
from ncline.completer import NclineCompleter
from ncline.context import DEFAULT_PROMPT, ShellContext
from ncline.exceptions import CommandError
from ncline.logger import logger
from ncline.parser.arguments import generate_arguments
from ncline.prompt_utils import prompt_fragments
from ncline.registry import CommandRegistry
from ncline.signals import QuitSignal
from ncline.themes import OneColors

_COMMAND_NAME = re.compile(r"\S*")
_LEADING_WORD = re.compile(r"^\S*\s")


class Shell:
    """
    Interactive line shell over a `CommandRegistry`.

    Args:
        registry (CommandRegistry): The registered commands.
        context (ShellContext | None): Shared context (watchers, prompt provider,
            console). A default context is created when omitted.
        welcome_message (str): Printed once when `run()` starts.
        history_path (Path | None): File for persistent prompt history.
        key_bindings (KeyBindings | None): Extra Prompt Toolkit key bindings.

    Methods:
        dispatch(line): Parse and run one input line, isolating failures.
        process_line(line): Async wrapper used by the loop; schedules awaitable results.
        complete(prefix): Prefix search over command names.
        run(): The interactive read-dispatch loop.
        shutdown(): Close watchers and stop.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        context: ShellContext | None = None,
        *,
        welcome_message: str = "",
        history_path: Path | None = None,
        key_bindings: KeyBindings | None = None,
    ) -> None:
        self.registry: CommandRegistry = registry
        self.context: ShellContext = context or ShellContext(
            data_dir=Path.home() / ".ncline", registry=registry
        )
        if self.context.registry is None:
            self.context.registry = registry
        self.console: Console = self.context.console
        self.welcome_message: str = welcome_message
        self.history: FileHistory | None = (
            FileHistory(str(history_path)) if history_path else None
        )
        self.key_bindings: KeyBindings = key_bindings or KeyBindings()
        self.prompt_text: str = DEFAULT_PROMPT
        self._background_tasks: set[asyncio.Future] = set()
        self._closed: bool = False
        self.refresh_prompt()

    @staticmethod
    def split_line(line: str) -> tuple[str, str]:
        """
        Split a line into the command name and the argument string.

        The name is the leading run of non-whitespace characters. The argument
        string is everything after the first whitespace character, and is
        empty when the line contains no space.
        """
        match = _COMMAND_NAME.match(line)
        command_name = match.group(0) if match else ""
        if " " not in line:
            return command_name, ""
        return command_name, _LEADING_WORD.sub("", line, count=1)

    def complete(self, prefix: str) -> list[str]:
        return self.registry.complete(prefix)

    def refresh_prompt(self) -> str:
        """Regenerate the prompt text from the context's prompt provider."""
        try:
            self.prompt_text = self.context.render_prompt()
        except Exception as error:
            logger.warning("Prompt provider failed, using default prompt: %s", error)
            self.prompt_text = DEFAULT_PROMPT
        return self.prompt_text

    def dispatch(self, line: str) -> Any:
        """
        Run one input line.

        Returns the command's return value, or None when the line was empty,
        unrecognized or the command failed.
        """
        command_name, argument_string = self.split_line(line)
        descriptor = self.registry.get(command_name)

        if descriptor is None:
            if command_name:
                logger.info("Unrecognized command '%s'.", command_name)
                self.console.print(
                    f"'{escape(command_name)}' is not a recognized command."
                )
            self.refresh_prompt()
            return None

        try:
            arguments = (
                generate_arguments(argument_string, descriptor.parameter_names)
                if argument_string
                else []
            )
            logger.debug("Running '%s' with %r", descriptor.name, arguments)
            return descriptor(*arguments)
        except CommandError as error:
            self._handle_command_error(descriptor, error)
        except Exception as error:
            self._handle_uncaught_error(descriptor.name, error)
        finally:
            self.refresh_prompt()
        return None

    def _handle_command_error(
        self, descriptor: CommandDescriptor, error: CommandError
    ) -> None:
        if not error.message:
            self._handle_uncaught_error(descriptor.name, error)
            return
        logger.info("[%s] %s", descriptor.name, error.message)
        self.console.print(escape(error.message), style="error")

    def _handle_uncaught_error(self, command_name: str, error: BaseException) -> None:
        logger.debug(
            "Command '%s' failed with error: %s", command_name, error, exc_info=error
        )
        self.console.print(
            f"[{OneColors.DARK_RED}]An uncaught error occurred with command "
            f"'{escape(command_name)}'.[/]"
        )

    async def process_line(self, line: str) -> Any:
        """
        Dispatch `line` and schedule any awaitable the command returned.

        Failures inside such background work are reported when the task
        finishes. They are outside the dispatch error boundary.
        """
        result = self.dispatch(line)
        if inspect.isawaitable(result):
            command_name, _ = self.split_line(line)
            task = asyncio.ensure_future(result)
            self._background_tasks.add(task)
            task.add_done_callback(partial(self._on_background_done, command_name))
            return task
        return result

    def _on_background_done(self, command_name: str, task: asyncio.Future) -> None:
        self._background_tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is None:
            return
        if isinstance(error, CommandError) and error.message:
            self.console.print(escape(error.message), style="error")
        else:
            self._handle_uncaught_error(command_name, error)

    def report_collisions(self) -> None:
        for warning in self.registry.collisions:
            logger.warning(warning)
            self.console.print(f"WARNING: {escape(warning)}", style="warning")

    def _get_prompt_message(self) -> StyleAndTextTuples:
        return prompt_fragments(self.prompt_text)

    @cached_property
    def prompt_session(self) -> PromptSession:
        return PromptSession(
            message=self._get_prompt_message,
            history=self.history,
            multiline=False,
            completer=NclineCompleter(self),
            complete_style=CompleteStyle.READLINE_LIKE,
            key_bindings=self.key_bindings,
            interrupt_exception=QuitSignal,
            eof_exception=QuitSignal,
        )

    def shutdown(self) -> None:
        """Close all watchers in registration order and cancel background work."""
        if self._closed:
            return
        self._closed = True
        errors = self.context.watchers.close_all()
        if errors:
            logger.warning("%d watcher(s) failed to close.", len(errors))
            output.warn(f"{len(errors)} watcher(s) failed to close.")
        for task in list(self._background_tasks):
            task.cancel()
        self.console.print("Exiting...", style="warning")

    async def run(self) -> None:
        """Run the interactive loop until the user quits."""
        logger.info("Starting ncline shell with %d commands.", len(self.registry))
        self.report_collisions()
        if self.welcome_message:
            self.console.print(self.welcome_message, style="info")
        self.refresh_prompt()
        try:
            while True:
                try:
                    with patch_stdout(raw=True):
                        line = await self.prompt_session.prompt_async()
                    await self.process_line(line)
                except QuitSignal:
                    logger.info("[QuitSignal]. <- Exiting shell.")
                    break
                except (EOFError, KeyboardInterrupt):
                    logger.info("EOF or KeyboardInterrupt. Exiting shell.")
                    break
        finally:
            self.shutdown()
