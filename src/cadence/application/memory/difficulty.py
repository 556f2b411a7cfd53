"""Difficulty model: bounded item difficulty with mean reversion."""

import math
from collections.abc import Sequence

from cadence.application.utils.numeric import clamp
from cadence.domain.constants import DIFFICULTY_MAX, DIFFICULTY_MIN
from cadence.domain.models import Rating


class DifficultyModel:
    """Initial and updated difficulty on the [1, 10] scale."""

    def initial_difficulty(self, rating: Rating, parameters: Sequence[float]) -> float:
        """
        D0(G) = w4 - e^(w5 * (G - 1)) + 1

        Lower grades give higher difficulty.
        """
        difficulty = parameters[4] - math.exp(parameters[5] * (rating - 1)) + 1
        return clamp(difficulty, DIFFICULTY_MIN, DIFFICULTY_MAX)

    def next_difficulty(
        self, difficulty: float, rating: Rating, parameters: Sequence[float]
    ) -> float:
        """
        D' = w7 * D0(Easy) + (1 - w7) * (D + linear_damping(-w6 * (G - 3)))
        """
        target = self.initial_difficulty(Rating.EASY, parameters)
        delta = -parameters[6] * (rating - 3)
        candidate = difficulty + self._linear_damping(delta, difficulty)
        next_difficulty = self._mean_reversion(target, candidate, parameters[7])
        return clamp(next_difficulty, DIFFICULTY_MIN, DIFFICULTY_MAX)

    @staticmethod
    def _linear_damping(delta: float, difficulty: float) -> float:
        # Swings shrink as difficulty approaches 10.
        return (10.0 - difficulty) * delta / 9.0

    @staticmethod
    def _mean_reversion(target: float, current: float, weight: float) -> float:
        return weight * target + (1 - weight) * current
