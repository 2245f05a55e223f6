# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import re
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

from ncline.console import console

_TRUE_VALUES = {"true", "True", "yes", "Yes", "y", "Y", "1"}
_BOOLEAN_PATTERNS = [
    re.compile(r"^(T|t)rue$"),
    re.compile(r"^(F|f)alse$"),
    re.compile(r"^(Y|y)es$"),
    re.compile(r"^(N|n)o$"),
    re.compile(r"^(Y|y)$"),
    re.compile(r"^(N|n)$"),
    re.compile(r"^(1|0)$"),
]


def is_boolean(value: str | int | bool) -> bool:
    """True if `value` is commonly read as a boolean (true/false, yes/no, y/n, 1/0)."""
    if isinstance(value, bool):
        return True
    if isinstance(value, int):
        return value in (0, 1)
    stripped = str(value).strip()
    return any(pattern.match(stripped) for pattern in _BOOLEAN_PATTERNS)


def boolean_value(value: str | int | bool) -> bool:
    """Read `value` as a boolean. Anything not recognizably true is False."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value == 1
    return str(value).strip() in _TRUE_VALUES


_CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
_JSON_FIELDS = "%(asctime)s %(name)s %(levelname)s %(message)s"
_LOG_MODES = ("cli", "json")
_CGROUP_FILE = Path("/proc/1/cgroup")


def running_in_container() -> bool:
    """Guess from PID 1's cgroups whether ncline runs inside a container."""
    try:
        cgroups = _CGROUP_FILE.read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in cgroups for marker in _CONTAINER_MARKERS)


def _default_log_mode() -> str:
    configured = os.getenv("NCLINE_LOG_MODE")
    if configured:
        return configured
    return "json" if running_in_container() else "cli"


def _console_handler(mode: str) -> logging.Handler:
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(_JSON_FIELDS))
        return handler
    return RichHandler(
        console=console,
        rich_tracebacks=True,
        show_path=False,
        markup=False,
        log_time_format="[%Y-%m-%d %H:%M:%S]",
    )


def _file_handler(log_path: Path, as_json: bool) -> logging.Handler:
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, "a", "UTF-8")
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(_JSON_FIELDS))
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | Path = "ncline.log",
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Route the root logger to the console and to `log_filename`.

    `mode` is "cli" for rich console records or "json" for one JSON object
    per line. Left unset it comes from `NCLINE_LOG_MODE`, falling back to
    "json" inside containers. The file log is plain text unless
    `json_log_to_file` is set.

    Raises:
        ValueError: If `mode` is not a known log mode.
    """
    mode = mode or _default_log_mode()
    if mode not in _LOG_MODES:
        raise ValueError(f"Unknown log mode '{mode}', expected one of {_LOG_MODES}.")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    for handler, level in (
        (_console_handler(mode), console_log_level),
        (_file_handler(Path(log_filename), json_log_to_file), file_log_level),
    ):
        handler.setLevel(level)
        root.addHandler(handler)

    for noisy in ("asyncio", "markdown_it"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.getLogger("ncline").debug("Logging initialized in '%s' mode.", mode)
