"""
Ncline Command Shell

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import asyncio
import logging
import sys
from argparse import ArgumentParser, Namespace

from rich.markup import escape

from ncline.config import find_config, load_name_overrides, load_settings
from ncline.console import console
from ncline.context import ShellContext
from ncline.exceptions import CommandModuleError, ConfigError
from ncline.loader import load_module_groups
from ncline.logger import logger
from ncline.registry import CommandRegistry
from ncline.shell import Shell
from ncline.themes import OneColors
from ncline.utils import setup_logging
from ncline.version import __version__

LEGACY_DEMO_FLAG = "demo:true"


def get_root_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="ncline",
        description="ncline - a command shell for your own command modules.",
    )
    parser.add_argument("--config", help="Path to an ncline.toml or ncline.yaml file.")
    parser.add_argument(
        "--demo", action="store_true", help="Also load the demo command modules."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug logs on the console."
    )
    parser.add_argument(
        "--log-mode", choices=["cli", "json"], help="Console log format."
    )
    parser.add_argument("--version", action="version", version=f"ncline v{__version__}")
    return parser


def parse_args(argv: list[str] | None = None) -> Namespace:
    argv = list(sys.argv[1:] if argv is None else argv)
    legacy_demo = LEGACY_DEMO_FLAG in argv
    args = get_root_parser().parse_args([arg for arg in argv if arg != LEGACY_DEMO_FLAG])
    args.demo = args.demo or legacy_demo
    return args


def build_shell(args: Namespace) -> Shell:
    """Load settings, discover command modules and build the shell."""
    settings = load_settings(find_config(args.config))
    settings.data_dir.mkdir(parents=True, exist_ok=True)

    setup_logging(
        args.log_mode,
        log_filename=settings.log_file,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    groups = list(settings.groups)
    if args.demo and "demo" not in groups:
        groups.append("demo")

    name_overrides = load_name_overrides(settings.name_overrides_file)
    context = ShellContext(data_dir=settings.data_dir)
    module_groups = load_module_groups(groups, settings.modules_dir, context)
    registry = CommandRegistry.build(module_groups, name_overrides)
    context.registry = registry

    return Shell(
        registry,
        context,
        welcome_message=settings.welcome_message,
        history_path=settings.history_file if settings.history else None,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    console.print("Starting ncline...", style="warning")
    try:
        shell = build_shell(args)
    except (ConfigError, CommandModuleError) as error:
        logger.debug("Startup failed: %s", error, exc_info=True)
        console.print(f"[{OneColors.DARK_RED}]❌ {escape(str(error))}[/]")
        return 1
    asyncio.run(shell.run())
    return 0


if __name__ == "__main__":
    sys.exit(main())
