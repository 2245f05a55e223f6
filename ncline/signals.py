# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used by the ncline shell.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so they pass
through the `except Exception` boundary that isolates command failures.

Signals:
- QuitSignal: Terminate the shell session (Ctrl-C, Ctrl-D or the `exit` command).
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in ncline.

    These are not errors. They are used to leave the dispatch loop.
    """


class QuitSignal(FlowSignal):
    """Raised to signal an orderly exit from the shell."""

    def __init__(self, message: str = "Quit signal received."):
        super().__init__(message)
