# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The command registry for the ncline shell.

`CommandRegistry` maps final command names to `CommandDescriptor`s. It is
filled once at startup from an ordered list of `ModuleGroup`s and read-only
afterwards.

Registration rules:
- The final name is the user override for (module identifier, command name)
  when one exists, otherwise the exported name.
- When a final name is registered twice the later command wins and a
  collision warning is recorded. Collisions never abort startup.
- A command whose parameters cannot be introspected aborts registration with
  `CommandModuleError`.

The registry also keeps the catalog of names, in first-registration order,
which backs tab completion through `complete()`.
"""
from __future__ import annotations

from typing import Iterator, Mapping, Sequence

from ncline.command import CommandDescriptor, CommandModule, ModuleGroup
from ncline.exceptions import CommandModuleError, SignatureError
from ncline.logger import logger
from ncline.parser.signature import get_parameter_names

NameOverrides = Mapping[str, Mapping[str, str]]


class CommandRegistry:
    """
    Name to `CommandDescriptor` mapping with collision tracking and prefix search.

    Attributes:
        collisions (list[str]): Collision warnings, in the order they occurred.
        catalog (list[str]): Registered command names in first-registration order.
    """

    def __init__(self, name_overrides: NameOverrides | None = None) -> None:
        self.name_overrides: NameOverrides = name_overrides or {}
        self._commands: dict[str, CommandDescriptor] = {}
        self.collisions: list[str] = []
        self.catalog: list[str] = []

    @classmethod
    def build(
        cls,
        groups: Sequence[ModuleGroup],
        name_overrides: NameOverrides | None = None,
    ) -> CommandRegistry:
        """Create a registry and register every group in the given order."""
        registry = cls(name_overrides)
        for group in groups:
            registry.register_group(group)
        logger.debug(
            "Registered %d commands from %d groups (%d collisions).",
            len(registry),
            len(groups),
            len(registry.collisions),
        )
        return registry

    def register_group(self, group: ModuleGroup) -> None:
        logger.debug("Registering module group '%s'.", group.name)
        for module in group.modules:
            self.register_module(module)

    def register_module(self, module: CommandModule) -> None:
        """Register every command exported by `module`, in declaration order."""
        for name, function in module.commands.items():
            try:
                parameter_names = get_parameter_names(function)
            except SignatureError as error:
                raise CommandModuleError(
                    f"Command '{name}' in module '{module.path}' could not be "
                    f"introspected: {error}"
                ) from error

            final_name = self.resolve_name(module.identifier, name)
            self.register(
                CommandDescriptor(
                    name=final_name,
                    function=function,
                    parameter_names=tuple(parameter_names),
                    owner=module.container,
                    source_path=module.path,
                    manual=module.manual.get(name),
                )
            )

    def resolve_name(self, module_identifier: str, name: str) -> str:
        """Apply the user-defined name override for this module, if any."""
        return self.name_overrides.get(module_identifier, {}).get(name, name)

    def register(self, descriptor: CommandDescriptor) -> None:
        name = descriptor.name
        if name in self._commands:
            warning = f"Command '{name}' is defined more than once, last command defined wins."
            logger.debug(
                "[collision] '%s' from '%s' replaces the one from '%s'.",
                name,
                descriptor.source_path,
                self._commands[name].source_path,
            )
            self.collisions.append(warning)
        else:
            self.catalog.append(name)
        self._commands[name] = descriptor

    def complete(self, prefix: str) -> list[str]:
        """
        Case-sensitive prefix search over the catalog.

        Returns every name starting with `prefix`, or the full catalog when
        nothing matches.
        """
        hits = [name for name in self.catalog if name.startswith(prefix)]
        return hits or list(self.catalog)

    def get(self, name: str) -> CommandDescriptor | None:
        return self._commands.get(name)

    def sorted_descriptors(self) -> list[CommandDescriptor]:
        return [self._commands[name] for name in sorted(self._commands)]

    def __getitem__(self, name: str) -> CommandDescriptor:
        return self._commands[name]

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __str__(self) -> str:
        return (
            f"CommandRegistry(commands={len(self._commands)}, "
            f"collisions={len(self.collisions)})"
        )
