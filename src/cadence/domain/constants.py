"""Centralized constants for the cadence scheduler.

All magic numbers and configuration defaults live here so every layer
imports from a single source of truth.
"""

from datetime import timedelta

from .models import FuzzRange

# ---------- FSRS parameters ----------
PARAMETER_COUNT = 21

# Published FSRS-6 defaults. Index meaning:
#   0-3   initial stability per rating
#   4-7   initial difficulty, difficulty delta and mean reversion
#   8-10  recall stability growth
#   11-14 post-lapse stability
#   15-16 hard penalty / easy bonus
#   17-19 same-day (short-term) stability
#   20    forgetting curve decay
DEFAULT_PARAMETERS: tuple[float, ...] = (
    0.2172,
    1.1771,
    3.2602,
    16.1507,
    7.0114,
    0.57,
    2.0966,
    0.0069,
    1.5261,
    0.112,
    1.0178,
    1.849,
    0.1133,
    0.3127,
    2.2934,
    0.2191,
    3.0004,
    0.7536,
    0.3332,
    0.1437,
    0.2,
)

# ---------- Memory model bounds ----------
STABILITY_MIN = 0.001
DIFFICULTY_MIN = 1.0
DIFFICULTY_MAX = 10.0

# ---------- Scheduler defaults ----------
DEFAULT_DESIRED_RETENTION = 0.9
DEFAULT_LEARNING_STEPS: tuple[timedelta, ...] = (timedelta(minutes=1), timedelta(minutes=10))
DEFAULT_RELEARNING_STEPS: tuple[timedelta, ...] = (timedelta(minutes=10),)
DEFAULT_MAXIMUM_INTERVAL = 36500  # days
DEFAULT_ENABLE_FUZZING = True

# ---------- Fuzzing ----------
FUZZ_MIN_INTERVAL = 2.5  # days; shorter intervals are never fuzzed
FUZZ_FLOOR_DAYS = 2
FUZZ_RANGES: tuple[FuzzRange, ...] = (
    FuzzRange(start=2.5, end=7.0, factor=0.15),
    FuzzRange(start=7.0, end=20.0, factor=0.1),
    FuzzRange(start=20.0, end=float("inf"), factor=0.05),
)

# ---------- Profiles ----------
DEFAULT_PROFILE = "default"
