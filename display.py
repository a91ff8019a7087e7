from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from rich.console import Console
from rich.control import Control
from rich.theme import Theme

import config

custom_theme = Theme({
    "info": "bold cyan",
    "success": "bold green",
    "timer_ok": "bold green",
    "timer_warn": "bold yellow",
    "timer_critical": "bold red",
})

console = Console(theme=custom_theme)


# ---------------------------------------------------------------------------
# Clock formatting
# ---------------------------------------------------------------------------

def _to_fixed(value: float, decimals: int) -> Decimal:
    """Round like JavaScript's ``toFixed``: exact binary value, ties away from zero."""
    return Decimal(value).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def format_clock(current_time: float, decimals: int) -> str:
    """Return remaining time as ``H:MM:SS.d``, dropping leading empty fields.

    125.123s -> "2:05", 72.123s -> "1:12", 43.123s -> "43", 8.123s -> "8.1" (1 decimal).
    """
    hours = int(current_time // 3600)
    minutes = int((current_time - hours * 3600) // 60)
    seconds = _to_fixed(current_time - hours * 3600 - minutes * 60, decimals)

    hours_str = str(hours)
    minutes_str = str(minutes)
    seconds_str = str(seconds)

    if hours < 10:
        hours_str = f"0{hours}"

    if minutes < 10 and hours >= 1:
        minutes_str = f"0{minutes}"

    if seconds < 10 and (minutes >= 1 or hours >= 1):
        seconds_str = f"0{seconds_str}"

    parts = []
    if hours > 0:
        parts.append(hours_str)
    if minutes > 0 or hours > 0:
        parts.append(minutes_str)
    parts.append(seconds_str)

    return ":".join(parts)


def max_display_width(start_time: float) -> int:
    """Widest line the clock can draw for a countdown starting at ``start_time``."""
    start_hours = int(start_time // 3600) % 24
    return (
        len(str(start_hours)) + 1                 # hours and a colon
        + 2 + 1                                   # minutes and a colon
        + 2 + 1 + config.EXPANDED_DECIMALS        # seconds, a decimal point, and decimals
    )


def clock_style(current_time: float) -> str:
    if current_time <= config.CRITICAL_SECONDS:
        return "timer_critical"
    elif current_time <= config.WARNING_SECONDS:
        return "timer_warn"
    return "timer_ok"


# ---------------------------------------------------------------------------
# Console output
# ---------------------------------------------------------------------------

def _carriage_return(out: Console) -> None:
    # rich drops control codes for non-terminals and strips "\r" from printed text.
    if out.is_terminal and not out.is_dumb_terminal:
        out.control(Control.move_to_column(0))
    else:
        out.file.write("\r")


def draw_clock(text: str, width: int, style: Optional[str] = None,
               out: Optional[Console] = None) -> None:
    """Overwrite the current line with ``text``, blanking ``width`` columns first."""
    out = out or console
    _carriage_return(out)
    out.print(" " * width, end="", soft_wrap=True, markup=False, highlight=False)
    _carriage_return(out)
    out.print(text, style=style, end="", soft_wrap=True, markup=False, highlight=False)
    out.file.flush()


def end_line(out: Optional[Console] = None) -> None:
    (out or console).print()


def format_seconds(seconds: float) -> str:
    """Show whole numbers without a decimal part: 185.0 -> "185", 2.5 -> "2.5"."""
    if float(seconds).is_integer():
        return str(int(seconds))
    return str(seconds)


def show_starting(seconds: float, out: Optional[Console] = None) -> None:
    (out or console).print(f"Starting timer is {format_seconds(seconds)} seconds.",
                           style="info", highlight=False)


def show_finished(message: str, out: Optional[Console] = None) -> None:
    (out or console).print(message, style="success", markup=False, highlight=False)


def show_info(message: str, out: Optional[Console] = None) -> None:
    (out or console).print(f"[info]{message}[/info]")
