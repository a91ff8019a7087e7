#!/usr/bin/env python3
"""Console countdown: main entry point."""

import argparse
import logging
import math
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

import config
import display
from models import CountdownConfig
from timer import CountdownTimer


def non_negative_seconds(raw: str) -> float:
    try:
        seconds = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of seconds: {raw!r}") from None
    if not math.isfinite(seconds) or seconds < 0:
        raise argparse.ArgumentTypeError(f"seconds must be a non-negative number, got {raw}")
    return seconds


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Count down from SECONDS, redrawing the remaining time in place")
    parser.add_argument("seconds", nargs="?", type=non_negative_seconds,
                        default=config.DEFAULT_START_SECONDS,
                        help=f"Starting time in seconds (default: {display.format_seconds(config.DEFAULT_START_SECONDS)})")
    parser.add_argument("--log-level", default=config.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help=f"Logging level (default: {config.LOG_LEVEL})")
    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    """Send log records to stderr so they never land on the clock line."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def build_timer(seconds: float, out: Optional[Console] = None, **kwargs) -> CountdownTimer:
    """Create a timer that prints the finish message when it reaches zero."""
    out = out or display.console

    def on_finish() -> None:
        display.show_finished(config.FINISH_MESSAGE, out)

    return CountdownTimer(CountdownConfig(start_time=seconds, on_finish=on_finish),
                          console=out, **kwargs)


def wait_for(timer: CountdownTimer, out: Optional[Console] = None) -> int:
    """Block until the timer finishes; Ctrl-C pauses it and returns 130."""
    try:
        timer.wait()
    except KeyboardInterrupt:
        timer.pause_if_running()
        display.end_line(out)
        display.show_info("Goodbye!", out)
        return 130
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    timer = build_timer(args.seconds)
    display.show_starting(args.seconds)
    timer.start()
    return wait_for(timer)


if __name__ == "__main__":
    sys.exit(main())
