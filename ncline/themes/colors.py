# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color palettes and the Rich theme used by the ncline console.

`OneColors` holds the One Dark palette used for inline markup
(e.g. `f"[{OneColors.DARK_RED}]..."`). Every color also has a bold
variant with a `_b` suffix.

`NordColors` holds the Nord palette that backs the named styles of the
console theme returned by `get_nord_theme()`.
"""
from rich.style import Style
from rich.theme import Theme


class ColorsMeta(type):
    """Adds a bold `_b` variant for every hex color declared on the class."""

    def __new__(mcs, name, bases, namespace):
        bold = {
            f"{key}_b": f"bold {value}"
            for key, value in namespace.items()
            if key.isupper() and isinstance(value, str) and value.startswith("#")
        }
        namespace.update(bold)
        return super().__new__(mcs, name, bases, namespace)


class OneColors(metaclass=ColorsMeta):
    BLACK = "#282C34"
    GUTTER_GREY = "#4B5263"
    COMMENT_GREY = "#5C6370"
    WHITE = "#ABB2BF"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    GREEN = "#98C379"
    CYAN = "#56B6C2"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"


class NordColors(metaclass=ColorsMeta):
    NORD0 = "#2E3440"
    NORD3 = "#4C566A"
    NORD4 = "#D8DEE9"
    NORD6 = "#ECEFF4"
    NORD7 = "#8FBCBB"
    NORD8 = "#88C0D0"
    NORD9 = "#81A1C1"
    NORD11 = "#BF616A"
    NORD12 = "#D08770"
    NORD13 = "#EBCB8B"
    NORD14 = "#A3BE8C"
    NORD15 = "#B48EAD"


def get_nord_theme() -> Theme:
    """Named styles for the shell console, built on the Nord palette."""
    return Theme(
        {
            "prompt": Style(color=NordColors.NORD8, bold=True),
            "prompt.alias": Style(color=NordColors.NORD13),
            "signature": Style(color=NordColors.NORD7),
            "info": Style(color=NordColors.NORD8),
            "success": Style(color=NordColors.NORD14),
            "warning": Style(color=NordColors.NORD13),
            "error": Style(color=NordColors.NORD11, bold=True),
            "heading": Style(color=NordColors.NORD15, underline=True),
            "muted": Style(color=NordColors.NORD3),
            "logging.level.debug": Style(color=NordColors.NORD3),
            "logging.level.info": Style(color=NordColors.NORD8),
            "logging.level.warning": Style(color=NordColors.NORD13),
            "logging.level.error": Style(color=NordColors.NORD11, bold=True),
            "logging.level.critical": Style(color=NordColors.NORD11, bold=True),
        }
    )
