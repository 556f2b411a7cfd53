"""
Retrievability model: probability of recall under the FSRS power-law curve.

This is a pure computation module with no I/O.
"""

import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from cadence.application.utils.numeric import elapsed_days
from cadence.domain.constants import DEFAULT_PARAMETERS
from cadence.domain.errors import InvalidState
from cadence.domain.models import Item

logger = logging.getLogger(__name__)


def forgetting_curve(parameters: Sequence[float]) -> tuple[float, float]:
    """Return (decay, factor) for the curve, so that R(t=S) == 0.9."""
    decay = -parameters[20]
    factor = 0.9 ** (1 / decay) - 1
    return decay, factor


class RetrievabilityModel:
    """
    Computes the current recall probability of an item.

    Stateless and side-effect free.
    """

    def retrievability(
        self,
        item: Item,
        now: datetime | None = None,
        parameters: Sequence[float] = DEFAULT_PARAMETERS,
    ) -> float:
        """
        R = (1 + factor * t / S) ^ decay, where t = whole days since last review.

        Returns 0 for an item that has never been reviewed. Negative elapsed
        time (clock skew) counts as zero days.
        """
        if item.last_review is None:
            return 0.0

        if item.memory is None:
            raise InvalidState(f"Item {item.item_id} was reviewed but has no memory state")

        if now is None:
            now = datetime.now(timezone.utc)
        decay, factor = forgetting_curve(parameters)

        days = elapsed_days(item.last_review, now)
        if days < 0:
            logger.debug(f"Item {item.item_id} reviewed {-days}d in the future; treating as 0")
            days = 0

        return (1 + factor * days / item.memory.stability) ** decay
