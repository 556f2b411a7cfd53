"""
Stdlib Random Source: Infrastructure adapter for the RandomSource port.
"""

import random

from cadence.domain.ports import RandomSource


class StdlibRandomSource(RandomSource):
    """
    Draws uniform floats from a private `random.Random` instance.

    Each instance owns its generator, so seeding one scheduler never affects
    another or the module-level `random` state.
    """

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def random(self) -> float:
        return self._rng.random()
