"""
Ports (interfaces) for the scheduler's non-deterministic dependencies.

Application services depend on these abstractions, not concrete
implementations, so tests can substitute deterministic sources.
"""

from abc import ABC, abstractmethod


class RandomSource(ABC):
    """
    Port for the uniform random numbers used by interval fuzzing.

    Implementations:
        - StdlibRandomSource: Backed by a private `random.Random` instance.
    """

    @abstractmethod
    def random(self) -> float:
        """
        Return the next uniform random float.

        Returns:
            A float in the half-open range [0.0, 1.0).
        """
        pass
