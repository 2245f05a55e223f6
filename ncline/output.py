# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
User-facing output helpers for command modules.

Use `throw_error()` to abort a command synchronously: the dispatch loop
catches the resulting `CommandError` and shows its message. Use `error()` to
report a failure from a background task where nothing is left to catch it.
The remaining helpers print informational, warning and success lines in the
console theme.
"""
from __future__ import annotations

from typing import NoReturn

from rich.markup import escape

from ncline.console import console
from ncline.exceptions import CommandError


def throw_error(message: str) -> NoReturn:
    raise CommandError(message)


def error(message: str) -> None:
    console.print(f"ERROR: {escape(str(message))}", style="error")


def msg(message: str) -> None:
    console.print(escape(message), style="info")


def warn(message: str) -> None:
    console.print(f"WARN: {escape(message)}", style="warning")


def success(message: str) -> None:
    console.print(escape(message), style="success")


def heading(message: str) -> None:
    console.print(escape(message), style="heading")
