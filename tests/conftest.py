"""Shared fixtures: a hand-driven scheduler and clock, and a captured console."""
import io

import pytest
from rich.console import Console

import display


class FakeHandle:
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Collects wakeups; tests fire them explicitly in order."""

    def __init__(self):
        self.handles = []

    def call_later(self, delay, callback):
        handle = FakeHandle(delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self):
        return [h for h in self.handles if not h.cancelled and h.callback is not None]

    def fire_next(self):
        handle = self.pending[0]
        callback, handle.callback = handle.callback, None
        callback()
        return handle


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def out():
    return Console(
        file=io.StringIO(),
        force_terminal=True,
        color_system=None,
        width=80,
        theme=display.custom_theme,
    )
