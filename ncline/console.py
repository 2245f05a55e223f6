# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for the ncline shell."""
from rich.console import Console

from ncline.themes import get_nord_theme

console = Console(color_system="truecolor", theme=get_nord_theme())
