# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""Renders the rich-markup prompt text as prompt_toolkit fragments."""
from prompt_toolkit.formatted_text import StyleAndTextTuples
from rich.console import Console
from rich.text import Text

_render_console = Console(color_system=None, width=999, legacy_windows=False)


def prompt_fragments(prompt: str | Text) -> StyleAndTextTuples:
    """
    Turn prompt markup such as `"[cyan]target ->[/] docs >> "` into the
    `(style, text)` pairs a `PromptSession` message accepts.

    Raises:
        TypeError: If `prompt` is neither markup nor a rich `Text`.
    """
    if isinstance(prompt, str):
        prompt = Text.from_markup(prompt)
    elif not isinstance(prompt, Text):
        raise TypeError(f"Cannot render a prompt from {type(prompt).__name__}.")

    return [
        (str(segment.style or ""), segment.text)
        for segment in prompt.render(_render_console)
        if segment.text
    ]
