"""
Ncline Command Shell

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .command import CommandDescriptor, CommandModule, ModuleGroup, command
from .registry import CommandRegistry
from .shell import Shell

logger = logging.getLogger("ncline")


__all__ = [
    "Shell",
    "CommandRegistry",
    "CommandDescriptor",
    "CommandModule",
    "ModuleGroup",
    "command",
]
