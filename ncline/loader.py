# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Filesystem discovery of command modules.

A module group is a directory, and each sub-directory of it is one command
module:

    cmd_modules/
      core/
        file_path/
          commands.py     # defines setup(context) or a `commands` container
          manual.json     # optional, per-command documentation

`commands.py` either defines `setup(context)` returning the command container,
or a module-level `commands` container. A container is a mapping of
name -> callable, or an object whose public methods are the commands.

Built-in groups ship inside the package (`ncline/cmd_modules/<group>`). User
groups live under the configured `modules_dir/<group>`. Directories are read in
sorted order, built-ins first.

Any module that fails to import, set up or expose its commands raises
`CommandModuleError`. That error is fatal at startup.
"""
from __future__ import annotations

import importlib.util
import json
import re
import sys
from pathlib import Path
from types import ModuleType
from typing import Any, Sequence

import yaml

from ncline.command import CommandModule, ModuleGroup
from ncline.context import ShellContext
from ncline.exceptions import CommandModuleError
from ncline.logger import logger

BUILTIN_MODULES_DIR = Path(__file__).parent / "cmd_modules"
COMMANDS_FILE = "commands.py"
MANUAL_FILES = ("manual.json", "manual.yaml", "manual.yml")


def _module_name(group: str, identifier: str) -> str:
    safe = re.sub(r"\W", "_", f"{group}.{identifier}")
    return f"ncline_cmd_modules.{safe}"


def import_commands_file(path: Path, module_name: str) -> ModuleType:
    """Import a `commands.py` file under `module_name`."""
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise CommandModuleError(f"Cannot import command module file {path}.")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as error:
        sys.modules.pop(module_name, None)
        logger.debug("Import of %s failed.", path, exc_info=True)
        raise CommandModuleError(
            f"Failed to import command module {path}: {error}"
        ) from error
    return module


def load_manual(directory: Path) -> dict[str, Any]:
    """Read the optional manual file of a command module directory."""
    for filename in MANUAL_FILES:
        path = directory / filename
        if not path.exists():
            continue
        try:
            with open(path, "r", encoding="UTF-8") as file:
                if path.suffix == ".json":
                    manual = json.load(file)
                else:
                    manual = yaml.safe_load(file)
        except (OSError, ValueError, yaml.YAMLError) as error:
            raise CommandModuleError(f"Invalid manual file {path}: {error}") from error
        if not isinstance(manual, dict):
            raise CommandModuleError(f"Manual file {path} must contain a mapping.")
        return manual
    return {}


def load_command_module(
    directory: Path, group: str, context: ShellContext
) -> CommandModule:
    """Import one command module directory and collect its commands."""
    identifier = directory.name
    commands_file = directory / COMMANDS_FILE
    if not commands_file.is_file():
        raise CommandModuleError(f"Command module '{group}/{identifier}' has no {COMMANDS_FILE}.")

    module = import_commands_file(commands_file, _module_name(group, identifier))

    if callable(getattr(module, "setup", None)):
        try:
            container = module.setup(context)
        except Exception as error:
            logger.debug("setup() of %s failed.", commands_file, exc_info=True)
            raise CommandModuleError(
                f"setup() failed for command module '{group}/{identifier}': {error}"
            ) from error
    elif hasattr(module, "commands"):
        container = module.commands
    else:
        raise CommandModuleError(
            f"Command module '{group}/{identifier}' defines neither setup() nor commands."
        )

    command_module = CommandModule.from_container(
        identifier,
        container,
        path=f"{group}/{identifier}",
        manual=load_manual(directory),
    )
    logger.debug(
        "Loaded command module '%s' with %d commands.",
        command_module.path,
        len(command_module.commands),
    )
    return command_module


def group_directories(group: str, modules_dir: Path | None = None) -> list[Path]:
    """Existing directories for `group`, built-in first."""
    candidates = [BUILTIN_MODULES_DIR / group]
    if modules_dir is not None:
        candidates.append(modules_dir / group)
    return [path for path in candidates if path.is_dir()]


def discover_group(
    group: str, directories: Sequence[Path], context: ShellContext
) -> ModuleGroup:
    modules = []
    for directory in directories:
        for entry in sorted(directory.iterdir()):
            if not entry.is_dir() or entry.name.startswith(("_", ".")):
                continue
            modules.append(load_command_module(entry, group, context))
    return ModuleGroup(name=group, modules=modules)


def load_module_groups(
    groups: Sequence[str], modules_dir: Path | None, context: ShellContext
) -> list[ModuleGroup]:
    """Discover every group in order. Groups with no directory are skipped."""
    loaded = []
    for group in groups:
        directories = group_directories(group, modules_dir)
        if not directories:
            logger.debug("No directory found for module group '%s'.", group)
            continue
        loaded.append(discover_group(group, directories, context))
    return loaded
