# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Settings and name override loading for the ncline shell.

Settings are read from a TOML, YAML or JSON file and validated with pydantic.
Relative paths in a settings file are resolved against the file's directory.

The name override file maps a command module identifier to renamed commands:

    {"file_path": {"create_alias": "mkalias"}}

It is created empty the first time the shell starts.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, TypeAdapter, ValidationError, model_validator

from ncline.exceptions import ConfigError
from ncline.logger import logger

DEFAULT_GROUPS = ["core", "public", "private"]
DEFAULT_WELCOME = 'ncline ready. Type "about" and hit Enter for help.'

_overrides_adapter: TypeAdapter[dict[str, dict[str, str]]] = TypeAdapter(
    dict[str, dict[str, str]]
)


def read_data_file(path: Path) -> Any:
    """Parse a `.toml`, `.yaml`/`.yml` or `.json` file by its suffix."""
    suffix = path.suffix.lower()
    with open(path, "r", encoding="UTF-8") as file:
        if suffix == ".toml":
            return toml.load(file)
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(file) or {}
        if suffix == ".json":
            return json.load(file)
    raise ConfigError(f"Unsupported file type '{suffix}' for {path}.")


class NclineSettings(BaseModel):
    """Runtime settings for the shell."""

    data_dir: Path = Field(default_factory=lambda: Path.home() / ".ncline")
    modules_dir: Path | None = None
    groups: list[str] = Field(default_factory=lambda: list(DEFAULT_GROUPS))
    name_overrides_file: Path | None = None
    log_file: Path | None = None
    history: bool = True
    welcome_message: str = DEFAULT_WELCOME

    @model_validator(mode="after")
    def fill_data_paths(self) -> NclineSettings:
        self.data_dir = self.data_dir.expanduser()
        if self.modules_dir is None:
            self.modules_dir = self.data_dir / "cmd_modules"
        if self.name_overrides_file is None:
            self.name_overrides_file = self.data_dir / "nameOverrides.json"
        if self.log_file is None:
            self.log_file = self.data_dir / "ncline.log"
        self.modules_dir = self.modules_dir.expanduser()
        self.name_overrides_file = self.name_overrides_file.expanduser()
        self.log_file = self.log_file.expanduser()
        return self

    @property
    def history_file(self) -> Path:
        return self.data_dir / ".ncline_history"


def find_config(explicit: str | Path | None = None) -> Path | None:
    """Return the first settings file that exists, explicit path first."""
    if explicit:
        path = Path(explicit).expanduser()
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        return path

    candidates = []
    if os.environ.get("NCLINE_CONFIG"):
        candidates.append(Path(os.environ["NCLINE_CONFIG"]).expanduser())
    candidates.extend(
        [
            Path.cwd() / "ncline.toml",
            Path.cwd() / "ncline.yaml",
            Path.cwd() / ".ncline.toml",
            Path.cwd() / ".ncline.yaml",
            Path.home() / ".config" / "ncline" / "ncline.toml",
            Path.home() / ".config" / "ncline" / "ncline.yaml",
        ]
    )
    return next((path for path in candidates if path.exists()), None)


def load_settings(path: Path | None = None) -> NclineSettings:
    """Load settings from `path`, or defaults when no file is given."""
    if path is None:
        logger.debug("No config file found, using default settings.")
        return NclineSettings()

    try:
        raw = read_data_file(path)
    except (OSError, ValueError, yaml.YAMLError) as error:
        raise ConfigError(f"Could not read config file {path}: {error}") from error
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping.")

    base = path.parent.resolve()
    for key in ("data_dir", "modules_dir", "name_overrides_file", "log_file"):
        value = raw.get(key)
        if isinstance(value, str):
            candidate = Path(value).expanduser()
            raw[key] = candidate if candidate.is_absolute() else base / candidate

    try:
        settings = NclineSettings.model_validate(raw)
    except ValidationError as error:
        raise ConfigError(f"Invalid config file {path}:\n{error}") from error
    logger.debug("Loaded settings from %s", path)
    return settings


def load_name_overrides(path: Path) -> dict[str, dict[str, str]]:
    """
    Load the command name override map, creating an empty file if missing.

    Raises:
        ConfigError: If the file cannot be parsed or has the wrong shape.
    """
    if not path.exists():
        logger.info("Creating empty name override file at %s", path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("{}", encoding="UTF-8")
        return {}

    try:
        raw = read_data_file(path)
    except (OSError, ValueError, yaml.YAMLError) as error:
        raise ConfigError(f"Could not read name overrides {path}: {error}") from error

    try:
        return _overrides_adapter.validate_python(raw or {})
    except ValidationError as error:
        raise ConfigError(f"Invalid name overrides in {path}:\n{error}") from error
