"""
Stability model: how long (in days) a memory lasts before R drops to 90%.

Covers the four FSRS stability updates:
1. Initial stability on the first review
2. Short-term stability for same-day repeats
3. Post-lapse stability when the item was forgotten
4. Recall stability when the item was remembered

Every result is floored at STABILITY_MIN so later powers and divisions
stay defined.
"""

import math
from collections.abc import Sequence

from cadence.application.utils.numeric import clamp_min
from cadence.domain.constants import STABILITY_MIN
from cadence.domain.models import Rating


class StabilityModel:
    """Stateless FSRS stability calculations."""

    def initial_stability(self, rating: Rating, parameters: Sequence[float]) -> float:
        """S0(G) = w[G - 1]"""
        return clamp_min(parameters[rating - 1], STABILITY_MIN)

    def short_term_stability(
        self, stability: float, rating: Rating, parameters: Sequence[float]
    ) -> float:
        """
        S' = S * e^(w17 * (G - 3 + w18)) * S^(-w19)

        A passing grade never lowers stability on a same-day review.
        """
        increase = math.exp(parameters[17] * (rating - 3 + parameters[18])) * math.pow(
            stability, -parameters[19]
        )

        if rating in (Rating.GOOD, Rating.EASY):
            increase = max(increase, 1.0)

        return clamp_min(stability * increase, STABILITY_MIN)

    def next_stability(
        self,
        difficulty: float,
        stability: float,
        retrievability: float,
        rating: Rating,
        parameters: Sequence[float],
    ) -> float:
        """
        Stability after a review on a later day.

        Args:
            difficulty: Difficulty before this review.
            stability: Stability before this review.
            retrievability: Recall probability at review time.
            rating: Grade given.
            parameters: FSRS parameter vector.

        Returns:
            The updated stability, at least STABILITY_MIN.
        """
        if rating == Rating.AGAIN:
            next_stability = self._forget_stability(
                difficulty, stability, retrievability, parameters
            )
        else:
            next_stability = self._recall_stability(
                difficulty, stability, retrievability, rating, parameters
            )

        return clamp_min(next_stability, STABILITY_MIN)

    def _forget_stability(
        self,
        difficulty: float,
        stability: float,
        retrievability: float,
        parameters: Sequence[float],
    ) -> float:
        long_term = (
            parameters[11]
            * math.pow(difficulty, -parameters[12])
            * (math.pow(stability + 1, parameters[13]) - 1)
            * math.exp((1 - retrievability) * parameters[14])
        )
        short_term = stability / math.exp(parameters[17] * parameters[18])

        # A lapse can never leave the item more stable than a same-day "Again".
        return min(long_term, short_term)

    def _recall_stability(
        self,
        difficulty: float,
        stability: float,
        retrievability: float,
        rating: Rating,
        parameters: Sequence[float],
    ) -> float:
        hard_penalty = parameters[15] if rating == Rating.HARD else 1
        easy_bonus = parameters[16] if rating == Rating.EASY else 1

        return stability * (
            1
            + math.exp(parameters[8])
            * (11 - difficulty)
            * math.pow(stability, -parameters[9])
            * (math.exp((1 - retrievability) * parameters[10]) - 1)
            * hard_penalty
            * easy_bonus
        )
