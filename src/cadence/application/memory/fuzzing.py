"""
Fuzz model: random jitter on review intervals.

Spreads items that would otherwise fall due on the same day. The envelope
widens with interval length according to FUZZ_RANGES.
"""

from collections.abc import Sequence
from datetime import timedelta

from cadence.domain.constants import FUZZ_FLOOR_DAYS, FUZZ_MIN_INTERVAL, FUZZ_RANGES
from cadence.domain.models import FuzzRange
from cadence.domain.ports import RandomSource
from cadence.infrastructure.random_source import StdlibRandomSource


class FuzzModel:
    """
    Applies bounded random jitter to review intervals.

    The random source is injected; it defaults to a private stdlib generator.
    """

    def __init__(
        self,
        random_source: RandomSource | None = None,
        fuzz_ranges: Sequence[FuzzRange] = FUZZ_RANGES,
    ):
        """
        Args:
            random_source: Source of uniform floats in [0, 1).
            fuzz_ranges: Ordered (start, end, factor) bands used to size the envelope.
        """
        self._random = random_source or StdlibRandomSource()
        self._ranges = tuple(fuzz_ranges)

    def apply_fuzzing(self, interval: timedelta, maximum_interval: int) -> timedelta:
        """
        Return a fuzzed interval in whole days, never above `maximum_interval`.

        Intervals shorter than 2.5 whole days are returned unchanged.
        """
        days = interval.days
        if days < FUZZ_MIN_INTERVAL:
            return interval

        lower, upper = self.fuzz_range(days, maximum_interval)
        fuzzed = self._random.random() * (upper - lower + 1) + lower
        return timedelta(days=min(round(fuzzed), maximum_interval))

    def fuzz_range(self, days: int, maximum_interval: int) -> tuple[int, int]:
        """
        Compute the inclusive (min, max) day bounds for fuzzing `days`.

        The lower bound is clamped to the upper one, so a small
        `maximum_interval` collapses the range to a single value.
        """
        delta = 1.0
        for fuzz_range in self._ranges:
            delta += fuzz_range.factor * max(min(days, fuzz_range.end) - fuzz_range.start, 0.0)

        lower = max(FUZZ_FLOOR_DAYS, round(days - delta))
        upper = min(round(days + delta), maximum_interval)
        lower = min(lower, upper)
        return lower, upper
