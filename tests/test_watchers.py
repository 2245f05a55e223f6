from unittest.mock import MagicMock

import pytest

from ncline.watchers import WatcherRegistry


def test_register_requires_close():
    watchers = WatcherRegistry()
    with pytest.raises(TypeError):
        watchers.register(object())
    assert len(watchers) == 0


def test_close_all_closes_in_registration_order():
    order = []
    watchers = WatcherRegistry()
    for name in ("one", "two", "three"):
        watcher = MagicMock()
        watcher.close.side_effect = lambda name=name: order.append(name)
        watchers.register(watcher)

    assert watchers.close_all() == []
    assert order == ["one", "two", "three"]


def test_close_all_continues_after_failure():
    first, broken, last = MagicMock(), MagicMock(), MagicMock()
    broken.close.side_effect = OSError("handle already closed")
    watchers = WatcherRegistry()
    for watcher in (first, broken, last):
        watchers.register(watcher)

    errors = watchers.close_all()

    first.close.assert_called_once()
    last.close.assert_called_once()
    assert len(errors) == 1
    assert isinstance(errors[0], OSError)


def test_close_all_empties_registry():
    watcher = MagicMock()
    watchers = WatcherRegistry()
    watchers.register(watcher)

    watchers.close_all()
    watchers.close_all()

    watcher.close.assert_called_once()
    assert watchers.watchers == []
