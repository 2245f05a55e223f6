# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Shared context handed to command modules.

`ShellContext` replaces module-level globals. A command module's
`setup(context)` receives it and can:

- read the command registry (after startup) to list or describe commands,
- register closable watchers released at shutdown,
- store persistent data under its own data directory,
- contribute the text of the interactive prompt.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field
from rich.console import Console

from ncline.console import console
from ncline.registry import CommandRegistry
from ncline.themes import OneColors
from ncline.version import __version__
from ncline.watchers import WatcherRegistry

DEFAULT_PROMPT = f"[{OneColors.CYAN_b}]ncline[/] [{OneColors.WHITE}]>>[/] "


class ShellContext(BaseModel):
    """
    Attributes:
        data_dir (Path): Root directory for persistent command module data.
        registry (CommandRegistry | None): Set once all modules are registered.
        watchers (WatcherRegistry): Resources closed at shutdown.
        console (Console): Console used for command output.
        prompt_provider (Callable[[], str] | None): Returns the prompt markup.
        version (str): The running ncline version.
    """

    data_dir: Path
    registry: CommandRegistry | None = None
    watchers: WatcherRegistry = Field(default_factory=WatcherRegistry)
    console: Console = Field(default_factory=lambda: console)
    prompt_provider: Callable[[], str] | None = None
    version: str = __version__

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def module_data_dir(self, identifier: str) -> Path:
        """Directory for a command module's data, created on first use."""
        path = self.data_dir / identifier
        path.mkdir(parents=True, exist_ok=True)
        return path

    def get_registry(self) -> CommandRegistry:
        if self.registry is None:
            raise RuntimeError("The command registry is not available until startup completes.")
        return self.registry

    def set_prompt_provider(self, provider: Callable[[], str]) -> None:
        self.prompt_provider = provider

    def render_prompt(self) -> str:
        if self.prompt_provider is None:
            return DEFAULT_PROMPT
        return self.prompt_provider()
