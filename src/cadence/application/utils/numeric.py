"""Small numeric helpers shared by the memory models."""

from datetime import datetime


def clamp(value: float, lower: float, upper: float) -> float:
    """Bound `value` to the closed range [lower, upper]."""
    return min(max(value, lower), upper)


def clamp_min(value: float, lower: float) -> float:
    """Bound `value` from below only."""
    return max(value, lower)


def elapsed_days(start: datetime, end: datetime) -> int:
    """
    Whole days from `start` to `end`, truncated toward zero.

    Negative when `end` precedes `start`; callers decide whether to clamp.
    """
    delta = end - start
    if delta.days >= 0:
        return delta.days
    return -((-delta).days)
