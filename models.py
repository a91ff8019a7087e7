import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable


class TimerState(str, Enum):
    PAUSED = "paused"
    RUNNING = "running"
    FINISHED = "finished"


def _no_op() -> None:
    pass


@dataclass
class CountdownConfig:
    start_time: float  # seconds
    on_finish: Callable[[], None] = field(default=_no_op)

    def __post_init__(self) -> None:
        if not math.isfinite(self.start_time) or self.start_time < 0:
            raise ValueError(f"start_time must be a non-negative number, got {self.start_time}")
