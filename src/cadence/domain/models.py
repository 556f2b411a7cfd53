"""
Domain models for FSRS scheduling.

These are pure data structures with no I/O or external dependencies beyond
ID generation. Every model is frozen: the scheduler produces new values
instead of mutating the caller's.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum

from .errors import InvalidState
from .ids import generate_item_id


class Rating(IntEnum):
    """Recall grade given by the learner. The value takes part in arithmetic."""

    AGAIN = 1
    HARD = 2
    GOOD = 3
    EASY = 4


class State(IntEnum):
    """Label for the phase an item is in."""

    LEARNING = 1
    REVIEW = 2
    RELEARNING = 3


def _check_step(step: int) -> None:
    if isinstance(step, bool) or not isinstance(step, int) or step < 0:
        raise InvalidState(f"Step must be a non-negative integer, got {step!r}")


@dataclass(frozen=True)
class Learning:
    """First-time learning; `step` indexes the configured learning steps."""

    step: int = 0

    def __post_init__(self):
        _check_step(self.step)

    @property
    def state(self) -> State:
        return State.LEARNING


@dataclass(frozen=True)
class Review:
    """Graduated item scheduled in whole days."""

    @property
    def state(self) -> State:
        return State.REVIEW


@dataclass(frozen=True)
class Relearning:
    """Lapsed item; `step` indexes the configured relearning steps."""

    step: int = 0

    def __post_init__(self):
        _check_step(self.step)

    @property
    def state(self) -> State:
        return State.RELEARNING


Phase = Learning | Review | Relearning


@dataclass(frozen=True)
class MemoryState:
    """
    FSRS memory state for an item.

    Attributes:
        stability: Days until recall probability drops to 90%.
        difficulty: Item difficulty on the 1-10 scale.
    """

    stability: float
    difficulty: float


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Item:
    """
    A learning item and its scheduling state.

    A fresh item is in Learning at step 0, has no memory state and is due
    immediately.
    """

    item_id: str = field(default_factory=generate_item_id)
    phase: Phase = field(default_factory=Learning)
    memory: MemoryState | None = None
    due: datetime = field(default_factory=_utcnow)
    last_review: datetime | None = None

    @property
    def state(self) -> State:
        return self.phase.state

    @property
    def step(self) -> int | None:
        """Current learning/relearning step, None while in Review."""
        return getattr(self.phase, "step", None)

    @property
    def stability(self) -> float | None:
        return self.memory.stability if self.memory else None

    @property
    def difficulty(self) -> float | None:
        return self.memory.difficulty if self.memory else None


@dataclass(frozen=True)
class ReviewLog:
    """
    A single review record.

    Attributes:
        item_id: The item that was reviewed.
        rating: Grade given during the review.
        review_datetime: When the review took place (UTC).
        review_duration: Optional opaque duration, stored as given.
    """

    item_id: str
    rating: Rating
    review_datetime: datetime
    review_duration: int | None = None


@dataclass(frozen=True)
class FuzzRange:
    """A band of interval lengths (days) and the jitter factor applied within it."""

    start: float
    end: float
    factor: float
