"""Interval model: stability + desired retention -> whole days."""

from collections.abc import Sequence

from cadence.application.utils.numeric import clamp

from .retrievability import forgetting_curve


class IntervalModel:
    """Inverts the forgetting curve to find when R falls to the desired retention."""

    def next_interval(
        self,
        stability: float,
        desired_retention: float,
        parameters: Sequence[float],
        maximum_interval: int,
    ) -> int:
        """
        I = S / factor * (r^(1/decay) - 1), rounded and bounded to [1, maximum_interval].

        Rounding is half-to-even.
        """
        decay, factor = forgetting_curve(parameters)
        interval = (stability / factor) * (desired_retention ** (1 / decay) - 1)
        return int(clamp(round(interval), 1, maximum_interval))
