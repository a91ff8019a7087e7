"""Countdown timer that redraws its remaining time in place on the console."""

import logging
import threading
import time
from typing import Callable, Optional

from rich.console import Console

import config
import display
from models import CountdownConfig, TimerState
from scheduler import Scheduler, ThreadingScheduler, WakeupHandle

logger = logging.getLogger(__name__)


class TimerStateError(Exception):
    """Raised when an operation is invoked from a state that forbids it."""

    def __init__(self, operation: str, state: TimerState):
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation} timer from state: '{state.value}'")


def tick_period_ms(current_time: float) -> float:
    """Milliseconds until the next redraw: shorter near zero, clamped to [50, 1000]."""
    period = current_time * config.TICK_SCALE * 1000
    return max(min(period, config.MAX_TICK_MS), config.MIN_TICK_MS)


def extra_decimals(current_time: float) -> int:
    return config.EXPANDED_DECIMALS if current_time <= config.EXPANDED_DECIMAL_THRESHOLD else 0


class CountdownTimer:
    """Paused/running/finished countdown driven by scheduled wakeups.

    Every tick measures the real time that passed between two wakeups and
    subtracts it, so scheduler jitter does not accumulate. Wakeups fire on the
    scheduler's threads; a re-entrant lock serialises them with start(),
    pause() and finish(), and ``done`` is set once the timer finishes so the
    caller can block on wait().
    """

    def __init__(
        self,
        options: CountdownConfig,
        scheduler: Optional[Scheduler] = None,
        clock: Callable[[], float] = time.monotonic,
        console: Optional[Console] = None,
    ):
        self.start_time = options.start_time
        self.current_time = options.start_time
        self.on_finish = options.on_finish
        self.done = threading.Event()
        self._state = TimerState.PAUSED
        self._wakeup: Optional[WakeupHandle] = None
        self._wakeup_id = 0
        self._scheduler = scheduler if scheduler is not None else ThreadingScheduler()
        self._clock = clock
        self._console = console or display.console
        self._lock = threading.RLock()

    @property
    def state(self) -> TimerState:
        return self._state

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self) -> None:
        with self._lock:
            if self._state is not TimerState.PAUSED:
                raise TimerStateError("start", self._state)
            self._state = TimerState.RUNNING
            logger.debug("Timer started with %.3fs remaining", self.current_time)
            self._schedule(self._tick)

    def pause(self) -> None:
        with self._lock:
            if self._state is not TimerState.RUNNING:
                raise TimerStateError("pause", self._state)
            self._state = TimerState.PAUSED
            self._cancel_wakeup()
            logger.debug("Timer paused with %.3fs remaining", self.current_time)

    def finish(self) -> None:
        with self._lock:
            if self._state is TimerState.FINISHED:
                raise TimerStateError("finish", self._state)
            self._state = TimerState.FINISHED
            self.current_time = 0
            self._cancel_wakeup()
            logger.debug("Timer finished")

            # Waiters are released only once the callback's output is written.
            try:
                if self.on_finish:
                    self.on_finish()
            finally:
                self.done.set()

    def pause_if_running(self) -> bool:
        """Pause unless a wakeup has already moved the timer out of RUNNING."""
        with self._lock:
            if self._state is not TimerState.RUNNING:
                return False
            self.pause()
            return True

    def is_finished(self) -> bool:
        return self.done.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self.done.wait(timeout)

    # ------------------------------------------------------------------
    # Display helpers
    # ------------------------------------------------------------------

    def tick_period(self) -> float:
        return tick_period_ms(self.current_time)

    def extra_decimals(self) -> int:
        return extra_decimals(self.current_time)

    def formatted_time(self) -> str:
        return display.format_clock(self.current_time, self.extra_decimals())

    def max_display_width(self) -> int:
        return display.max_display_width(self.start_time)

    def _display_time(self) -> None:
        display.draw_clock(
            self.formatted_time(),
            self.max_display_width(),
            style=display.clock_style(self.current_time),
            out=self._console,
        )

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------

    def _schedule(self, callback: Callable[[], None]) -> None:
        # Caller holds the lock, so a wakeup cannot run before its handle is stored.
        self._wakeup_id += 1
        wakeup_id = self._wakeup_id

        def fire() -> None:
            with self._lock:
                if self._state is not TimerState.RUNNING or wakeup_id != self._wakeup_id:
                    return
                self._wakeup = None
                callback()

        self._wakeup = self._scheduler.call_later(self.tick_period() / 1000, fire)

    def _cancel_wakeup(self) -> None:
        if self._wakeup is not None:
            self._wakeup.cancel()
            self._wakeup = None

    def _tick(self) -> None:
        started = self._clock()

        def elapse() -> None:
            self.current_time -= self._clock() - started

            if self.current_time <= 0:
                display.end_line(self._console)
                self.finish()
            else:
                self._display_time()
                self._tick()

        self._schedule(elapse)
