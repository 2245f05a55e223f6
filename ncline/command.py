# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the command model for the ncline shell.

- `CommandDescriptor`: the registry record of one invocable command (final name,
  callable, ordered parameter names, owner, provenance and manual).
- `CommandModule`: the commands exported by one command module directory.
- `ModuleGroup`: an ordered catalog of command modules (`core`, `public`, ...).
- `command`: decorator that declares a command's parameter names (and
  optionally its exposed name) explicitly instead of relying on introspection.

Descriptors are built once at startup by the `CommandRegistry` and never
mutated afterwards.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ncline.exceptions import CommandArgumentError, CommandModuleError
from ncline.parser.signature import (
    PARAMS_ATTRIBUTE,
    accepts_variadic,
    count_required,
    render_signature,
)

NAME_ATTRIBUTE = "__ncline_name__"


def command(
    params: Sequence[str] | None = None, *, name: str | None = None
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Attach explicit command metadata to a function or method.

    Args:
        params (Sequence[str] | None): Ordered parameter names used for
            named-argument resolution and signature rendering. When omitted the
            names are introspected from the function signature.
        name (str | None): The command name to expose instead of the
            attribute name.

    Example:
        ```
        class Commands:
            @command(params=["alias", "filepath"], name="createAlias")
            def create_alias(self, alias, filepath): ...
        ```
    """

    def decorator(function: Callable[..., Any]) -> Callable[..., Any]:
        if params is not None:
            setattr(function, PARAMS_ATTRIBUTE, tuple(params))
        if name is not None:
            setattr(function, NAME_ATTRIBUTE, name)
        return function

    return decorator


class CommandDescriptor(BaseModel):
    """
    One invocable command held by the `CommandRegistry`.

    Attributes:
        name (str): Final external name, after name overrides.
        function (Callable): The callable to invoke. Bound methods carry their
            receiver with them.
        parameter_names (tuple[str, ...]): Declared parameter names, in order.
        owner (Any): The exported command container the callable belongs to.
        source_path (str): `<group>/<module>` the command was loaded from.
        manual (Any): Optional free-form documentation shown by `help`.
    """

    name: str
    function: Callable[..., Any]
    parameter_names: tuple[str, ...] = ()
    owner: Any = None
    source_path: str = ""
    manual: Any = None

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @property
    def signature(self) -> str:
        return render_signature(self.name, self.parameter_names)

    def bind_arguments(self, arguments: Sequence[str | None]) -> list[str | None]:
        """
        Fit parsed arguments to the callable.

        Missing required parameters are padded with None so that command
        bodies can validate them and report a message. Surplus arguments are
        rejected unless the callable takes `*args`.
        """
        bound = list(arguments)
        arity = len(self.parameter_names)
        if len(bound) > arity and not accepts_variadic(self.function):
            raise CommandArgumentError(
                f"Command '{self.name}' takes {arity} argument(s) "
                f"but {len(bound)} were given. Usage: {self.signature}"
            )
        required = count_required(self.function, self.parameter_names)
        if len(bound) < required:
            bound.extend([None] * (required - len(bound)))
        return bound

    def __call__(self, *arguments: str | None) -> Any:
        return self.function(*self.bind_arguments(arguments))

    def __str__(self) -> str:
        return f"CommandDescriptor(name='{self.name}', source='{self.source_path}')"


def collect_commands(container: Any) -> dict[str, Callable[..., Any]]:
    """
    Return the exported commands of a container, in declaration order.

    A mapping contributes its callable values. Any other object contributes
    its public callable attributes, walking its class hierarchy base-first.
    Nested classes and class-valued attributes are not commands.
    """
    if isinstance(container, Mapping):
        commands = dict(container)
        for name, function in commands.items():
            if not callable(function):
                raise CommandModuleError(
                    f"Command '{name}' is not callable ({type(function).__name__})."
                )
        return commands

    commands = {}
    seen: set[str] = set()
    for klass in reversed(type(container).__mro__[:-1]):
        for attribute, value in vars(klass).items():
            if attribute.startswith("_") or attribute in seen:
                continue
            if isinstance(value, type):
                continue
            seen.add(attribute)
            function = getattr(container, attribute)
            if callable(function):
                commands[getattr(function, NAME_ATTRIBUTE, attribute)] = function
    return commands


class CommandModule(BaseModel):
    """
    The commands exported by a single command module.

    Attributes:
        identifier (str): Module identifier, the key used by name overrides.
        path (str): Catalog path such as `core/file_path`.
        container (Any): The exported command container.
        commands (dict[str, Callable]): Exported commands in declaration order.
        manual (dict[str, Any]): Per-command documentation, keyed by the
            original command name.
    """

    identifier: str
    path: str
    container: Any = None
    commands: dict[str, Callable[..., Any]] = Field(default_factory=dict)
    manual: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @classmethod
    def from_container(
        cls,
        identifier: str,
        container: Any,
        *,
        path: str | None = None,
        manual: dict[str, Any] | None = None,
    ) -> CommandModule:
        return cls(
            identifier=identifier,
            path=path or identifier,
            container=container,
            commands=collect_commands(container),
            manual=manual or {},
        )


class ModuleGroup(BaseModel):
    """An ordered catalog of command modules registered together."""

    name: str
    modules: list[CommandModule] = Field(default_factory=list)
