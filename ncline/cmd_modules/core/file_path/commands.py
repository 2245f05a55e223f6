# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
File path alias commands.

Aliases give short names to directories. An alias either points at one path
or, as an *alias set*, at a list of paths. One alias is the current *target*
and another may be the current *source*. Both are shown in the shell prompt
and are available to other command modules through `FilePathStore`.

Data is kept in `<data_dir>/file_path/data.json`.
"""
from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError
from rich.markup import escape

from ncline import output
from ncline.context import ShellContext
from ncline.exceptions import CommandModuleError
from ncline.logger import logger
from ncline.themes import OneColors
from ncline.utils import boolean_value, is_boolean

ALIAS_SET_ACTIONS = ("add", "update", "delete")


class PathPointer(BaseModel):
    alias: str
    path: str


class PathData(BaseModel):
    verbose: bool = False
    target: PathPointer
    source: PathPointer | None = None
    previous_target: PathPointer | None = None
    previous_source: PathPointer | None = None
    aliases: dict[str, str | list[str]] = Field(default_factory=dict)

    @classmethod
    def initial(cls, home: str) -> PathData:
        return cls(
            target=PathPointer(alias="self", path=home),
            aliases={"self": home},
        )


class FilePathStore:
    """Loads, saves and queries the alias data. Shared with other modules."""

    def __init__(self, data_file: Path, home: str):
        self.data_file = data_file
        if data_file.exists():
            try:
                self.data = PathData.model_validate_json(
                    data_file.read_text(encoding="UTF-8")
                )
            except (OSError, ValidationError) as error:
                raise CommandModuleError(
                    f"Could not load path aliases from {data_file}: {error}"
                ) from error
        else:
            logger.info("Creating path alias data file at %s", data_file)
            self.data = PathData.initial(home)
            self.save()

    def save(self) -> None:
        try:
            self.data_file.write_text(
                self.data.model_dump_json(indent=2), encoding="UTF-8"
            )
        except OSError as error:
            output.throw_error(f"Could not save path aliases: {error}")

    def notify(self, message: str) -> None:
        if self.data.verbose:
            output.success(message)

    def get_alias(self, alias: str | None) -> str | list[str]:
        if alias is None:
            output.throw_error("The alias parameter must be defined.")
        if alias not in self.data.aliases:
            output.throw_error(f"Alias '{alias}' not found.")
        return self.data.aliases[alias]

    def is_alias_set(self, alias: str) -> bool:
        return isinstance(self.data.aliases.get(alias), list)

    @property
    def target_path(self) -> str:
        return self.data.target.path

    @property
    def source_path(self) -> str | None:
        return self.data.source.path if self.data.source else None

    def render_prompt(self) -> str:
        prompt = ""
        if self.data.source:
            prompt += (
                f"[{OneColors.COMMENT_GREY}]source ->[/] "
                f"[{OneColors.LIGHT_YELLOW}]{escape(self.data.source.alias)}[/], "
            )
        prompt += (
            f"[{OneColors.COMMENT_GREY}]target ->[/] "
            f"[{OneColors.CYAN_b}]{escape(self.data.target.alias)}[/] >> "
        )
        return prompt


class FilePathCommands:
    def __init__(self, store: FilePathStore, context: ShellContext):
        self._store = store
        self._context = context

    @property
    def _aliases(self) -> dict[str, str | list[str]]:
        return self._store.data.aliases

    def _ensure_new(self, alias: str) -> None:
        if alias in self._aliases:
            if self._store.is_alias_set(alias):
                output.throw_error(
                    f"Alias '{alias}' already exists as an alias set; "
                    "use update_alias_set or delete_alias_set to change."
                )
            output.throw_error(
                f"Alias '{alias}' already exists; use update_alias or delete_alias to change."
            )

    def _ensure_single(self, alias: str, hint: str) -> None:
        if alias not in self._aliases:
            output.throw_error(f"Alias '{alias}' not found; use create_alias to create.")
        if self._store.is_alias_set(alias):
            output.throw_error(f"Alias '{alias}' belongs to an alias set; use {hint} to modify.")

    def _ensure_set(self, alias: str) -> None:
        if alias not in self._aliases:
            output.throw_error(
                f"Alias set '{alias}' not found; use create_alias_set to create."
            )
        if not self._store.is_alias_set(alias):
            output.throw_error(f"Alias '{alias}' does not match an alias set.")

    def set_path_verbose(self, setting):
        if setting is None or not is_boolean(setting):
            output.throw_error(
                "You must provide a string representing a Boolean value "
                "(true/false, yes/no, or y/n)"
            )
        self._store.data.verbose = boolean_value(setting)
        self._store.save()

    def create_alias(self, alias, filepath):
        if alias is None or filepath is None:
            output.throw_error("The alias and filepath parameters must be defined.")
        self._ensure_new(alias)
        self._aliases[alias] = filepath
        self._store.save()
        self._store.notify(f"Path alias '{alias}' set to '{filepath}'.")

    def update_alias(self, alias, filepath):
        if alias is None or filepath is None:
            output.throw_error("The alias and filepath parameters must be defined.")
        self._ensure_single(alias, "update_alias_set")
        self._aliases[alias] = filepath
        self._store.save()
        self._store.notify(f"Path alias '{alias}' updated to '{filepath}'.")

    def rename_alias(self, current_alias, new_alias):
        if current_alias is None or new_alias is None:
            output.throw_error("The current and new alias names must be defined.")
        self._ensure_single(current_alias, "rename_alias_set")
        self._aliases[new_alias] = self._aliases.pop(current_alias)
        self._store.save()
        self._store.notify(f"Path alias '{current_alias}' renamed to '{new_alias}'.")

    def delete_alias(self, alias):
        if alias is None:
            output.throw_error("The alias parameter must be defined.")
        if alias not in self._aliases:
            output.throw_error(f"Alias '{alias}' not found.")
        self._ensure_single(alias, "delete_alias_set")
        del self._aliases[alias]
        self._store.save()
        self._store.notify(f"Path alias '{alias}' deleted.")

    def create_alias_set(self, alias, filepath):
        if alias is None or filepath is None:
            output.throw_error("The alias and filepath parameters must be defined.")
        self._ensure_new(alias)
        self._aliases[alias] = [filepath]
        self._store.save()
        self._store.notify(
            f"Alias set '{alias}' created with first path set to '{filepath}'."
        )

    def update_alias_set(self, alias, action, filepath, replacement_filepath=None):
        if alias is None or action is None or filepath is None:
            output.throw_error(
                "The alias, action ('add', 'update', or 'delete') and filepath "
                "parameters must be defined."
            )
        if action not in ALIAS_SET_ACTIONS:
            output.throw_error("The action must be either 'add', 'update' or 'delete'.")
        if action == "update" and not replacement_filepath:
            output.throw_error(
                "When using the 'update' action, you must provide 2 filepaths: "
                "the one being replaced and the replacement"
            )
        self._ensure_set(alias)

        paths = self._aliases[alias]
        if action == "add":
            paths.append(filepath)
            message = f"Path '{filepath}' added to alias set '{alias}'."
        else:
            if filepath not in paths:
                output.throw_error(f"Path '{filepath}' not found in alias set '{alias}'.")
            index = paths.index(filepath)
            if action == "update":
                paths[index] = replacement_filepath
                message = (
                    f"Alias set '{alias}' path '{filepath}' changed to "
                    f"'{replacement_filepath}'."
                )
            else:
                del paths[index]
                message = f"Path '{filepath}' removed from alias set '{alias}'."
        self._store.save()
        self._store.notify(message)

    def rename_alias_set(self, current_alias, new_alias):
        if current_alias is None or new_alias is None:
            output.throw_error("The current and new alias names must be defined.")
        self._ensure_set(current_alias)
        self._aliases[new_alias] = self._aliases.pop(current_alias)
        self._store.save()
        self._store.notify(f"Path alias set '{current_alias}' renamed to '{new_alias}'.")

    def delete_alias_set(self, alias):
        if alias is None:
            output.throw_error("The alias parameter must be defined.")
        if alias not in self._aliases:
            output.throw_error(f"Alias '{alias}' not found.")
        self._ensure_set(alias)
        del self._aliases[alias]
        self._store.save()
        self._store.notify(f"Path alias set '{alias}' deleted.")

    def _pointer_for(self, alias: str, role: str) -> PathPointer:
        if alias not in self._aliases:
            output.throw_error(
                f"Filepath alias '{alias}' not recognized; "
                "create it with 'create_alias {alias} {filepath}'"
            )
        if self._store.is_alias_set(alias):
            output.throw_error(
                f"Alias '{alias}' refers to an alias set, which cannot be a {role}."
            )
        return PathPointer(alias=alias, path=self._aliases[alias])

    def target(self, alias=None):
        data = self._store.data
        if alias is None:
            output.msg(
                f"Current target alias:path is '{data.target.alias}': {data.target.path}"
            )
            return
        pointer = self._pointer_for(alias, "target")
        data.previous_target = data.target
        data.target = pointer
        self._store.save()
        self._store.notify(f"Target path set to '{pointer.alias}': {pointer.path}")

    def source(self, alias=None):
        data = self._store.data
        if alias is None:
            if data.source:
                output.msg(
                    f"Current source alias:path is '{data.source.alias}': {data.source.path}"
                )
            else:
                output.msg("Currently no source alias/path is defined.")
            return
        pointer = self._pointer_for(alias, "source")
        data.previous_source = data.source
        data.source = pointer
        self._store.save()
        self._store.notify(f"Source path set to '{pointer.alias}': {pointer.path}")

    def clear_source(self):
        data = self._store.data
        data.previous_source = data.source
        data.source = None
        self._store.save()
        self._store.notify("Source cleared.")

    def show_paths(self):
        console = self._context.console
        output.heading("Current filepath aliases:")
        for alias in sorted(self._aliases):
            value = self._aliases[alias]
            if isinstance(value, list):
                console.print(f"{escape(alias)}:", style="info")
                for path in value:
                    console.print(f"   {escape(path)}", style="info")
                console.print("")
            else:
                console.print(f"{escape(alias)}: {escape(value)}", style="info")


def setup(context: ShellContext) -> FilePathCommands:
    store = FilePathStore(
        context.module_data_dir("file_path") / "data.json", str(Path.cwd())
    )
    context.set_prompt_provider(store.render_prompt)
    return FilePathCommands(store, context)
