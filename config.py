import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).parent / ".env")


def _get_setting(key: str, default: str = "") -> str:
    return os.getenv(key, default)


# ---------------------------------------------------------------------------
# Environment-driven settings
# ---------------------------------------------------------------------------
DEFAULT_START_SECONDS: float = float(_get_setting("COUNTDOWN_DEFAULT_SECONDS", "185"))
FINISH_MESSAGE: str = _get_setting("COUNTDOWN_FINISH_MESSAGE", "Finished!")
LOG_LEVEL: str = _get_setting("COUNTDOWN_LOG_LEVEL", "WARNING").upper()

# ---------------------------------------------------------------------------
# Tick pacing
# ---------------------------------------------------------------------------

# Redraw faster near zero, but never below the flicker floor or above one second.
TICK_SCALE: float = 1.1
MIN_TICK_MS: float = 50
MAX_TICK_MS: float = 1000

# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

EXPANDED_DECIMAL_THRESHOLD: float = 9.9
EXPANDED_DECIMALS: int = 1

# Remaining-time thresholds (seconds) for the clock colour
CRITICAL_SECONDS: float = 10
WARNING_SECONDS: float = 60
