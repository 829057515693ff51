"""Pytest fixtures for eventemitter tests."""

import pytest

from eventemitter import EventEmitter


class Recorder:
    """Callable that records every call it receives, in order, across handlers."""

    def __init__(self, log=None, label=None):
        self.log = log if log is not None else []
        self.label = label

    def __call__(self, *args, **kwargs):
        self.log.append((self.label, args, kwargs))


class Widget:
    """Minimal host object that embeds an emitter the way applications do."""

    def __init__(self):
        self.events = EventEmitter(host=self)
        self.clicks = 0

    def click(self, count=1):
        self.clicks += count
        self.events.emit("click", count)


@pytest.fixture
def emitter():
    """Create a standalone EventEmitter."""
    return EventEmitter()


@pytest.fixture
def call_log():
    """Shared list that recorders append to, for checking cross-handler order."""
    return []


@pytest.fixture
def make_recorder(call_log):
    """Factory for labelled recorders sharing one call log."""

    def _make(label):
        return Recorder(call_log, label)

    return _make


@pytest.fixture
def widget():
    return Widget()
