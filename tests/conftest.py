"""Shared fixtures for all tests."""

import logging

import pytest

from pyawaiter.cancellation import CancellationSource
from pyawaiter.events import Event


class Recorder:
    """Subscription mechanism backed by an event that counts calls."""

    def __init__(self):
        self.event = Event("recorded")
        self.subscribed = 0
        self.unsubscribed = 0

    def subscribe(self, handler):
        self.subscribed += 1
        self.event.subscribe(handler)

    def unsubscribe(self, handler):
        self.unsubscribed += 1
        self.event.unsubscribe(handler)

    def fire(self, *args):
        self.event.fire(*args)


@pytest.fixture
def recorder():
    """Returns a fresh Recorder."""
    return Recorder()


@pytest.fixture
def make_recorder():
    """Factory fixture returning fresh Recorders."""
    return Recorder


@pytest.fixture
def source():
    """Returns a fresh CancellationSource."""
    return CancellationSource()


@pytest.fixture
def restore_root_logger():
    """Restores root logger handlers and level after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
