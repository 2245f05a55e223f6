# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Demo commands for learning the ncline argument syntax.

This module exports a plain mapping instead of a class, and declares
parameter names explicitly with the `command` decorator.
"""
import asyncio

from ncline import output
from ncline.command import command


@command(params=["name", "greeting"])
def greet(name, greeting=None):
    if name is None:
        output.throw_error("Tell me who to greet, e.g. 'greet Ada'.")
    output.success(f"{greeting or 'Hello'}, {name}!")


def echo(*values):
    for index, value in enumerate(values):
        output.msg(f"[{index}] {'<null>' if value is None else repr(value)}")


async def countdown(seconds):
    try:
        remaining = int(seconds)
    except (TypeError, ValueError):
        output.error(f"'{seconds}' is not a whole number of seconds.")
        return
    while remaining > 0:
        output.msg(f"{remaining}...")
        await asyncio.sleep(1)
        remaining -= 1
    output.success("Liftoff!")


commands = {
    "greet": greet,
    "echo": echo,
    "countdown": countdown,
}
