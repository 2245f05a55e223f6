# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Tracks resources that must be released when the shell exits.

Commands that start long-lived resources (file system watchers, observers,
open handles) register them here. Every watcher only needs a `close()`
method. At shutdown they are closed in registration order, and a watcher
that fails to close does not stop the others from closing.
"""
from __future__ import annotations

from typing import Protocol

from ncline.logger import logger


class Closable(Protocol):
    def close(self) -> object: ...


class WatcherRegistry:
    """Append-only list of closables, drained by `close_all()`."""

    def __init__(self) -> None:
        self._watchers: list[Closable] = []

    def register(self, watcher: Closable) -> None:
        if not callable(getattr(watcher, "close", None)):
            raise TypeError(f"{watcher!r} has no close() method.")
        self._watchers.append(watcher)

    @property
    def watchers(self) -> list[Closable]:
        return list(self._watchers)

    def close_all(self) -> list[Exception]:
        """Close every watcher and return the errors raised along the way."""
        errors: list[Exception] = []
        watchers, self._watchers = self._watchers, []
        for watcher in watchers:
            try:
                watcher.close()
            except Exception as error:
                logger.warning("Failed to close watcher %r: %s", watcher, error)
                errors.append(error)
        return errors

    def __len__(self) -> int:
        return len(self._watchers)
