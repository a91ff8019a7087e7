"""Deferred, cancelable callbacks for the countdown clock."""

import threading
from typing import Callable, Protocol


class WakeupHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything that can run ``callback`` once after ``delay`` seconds."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> WakeupHandle: ...


class ThreadingScheduler:
    """Runs each wakeup on a daemon ``threading.Timer``.

    The returned handle is the ``threading.Timer`` itself, so callers cancel a
    pending wakeup with ``handle.cancel()``. Daemon threads never keep the
    process alive once the main thread exits.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        handle = threading.Timer(max(delay, 0.0), callback)
        handle.daemon = True
        handle.start()
        return handle
