# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by the ncline shell.

Exception Hierarchy:
- NclineError
    ├── CommandError
    │     └── CommandArgumentError
    ├── CommandModuleError
    ├── SignatureError
    └── ConfigError

`CommandError` is the error a command body raises on purpose. When it carries
a message, the dispatch loop shows that message to the user verbatim. Any
other exception escaping a command is reported as an uncaught error naming
the command.

`CommandModuleError` and `ConfigError` are startup errors. They are not caught
by the shell and abort the process.
"""


class NclineError(Exception):
    """Base exception for the ncline shell."""


class CommandError(NclineError):
    """Raised by a command body to report a problem to the user."""

    def __init__(self, message: str | None = None):
        super().__init__(message or "")
        self.message: str | None = message


class CommandArgumentError(CommandError):
    """Raised when the parsed arguments cannot be applied to a command."""


class CommandModuleError(NclineError):
    """Raised when a command module cannot be loaded or introspected."""


class SignatureError(NclineError):
    """Raised when the parameter names of a callable cannot be determined."""


class ConfigError(NclineError):
    """Raised when the settings or name override files are invalid."""
