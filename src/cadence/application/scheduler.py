"""
FSRS Scheduler: Application layer orchestrator.

Drives the per-item state machine for one review at a time:
1. Validate the review time and rating
2. Update stability and difficulty
3. Pick the next phase and interval from the pre-review phase
4. Optionally fuzz Review intervals
5. Produce a new Item and an immutable ReviewLog
"""

import logging
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime, timedelta, timezone

from cadence.application.config import SchedulerConfig
from cadence.application.memory import (
    DifficultyModel,
    FuzzModel,
    IntervalModel,
    RetrievabilityModel,
    StabilityModel,
)
from cadence.application.utils.numeric import elapsed_days
from cadence.domain.errors import InvalidRating, InvalidState, InvalidTimeBasis
from cadence.domain.models import (
    Item,
    Learning,
    MemoryState,
    Phase,
    Rating,
    Relearning,
    Review,
    ReviewLog,
)
from cadence.domain.ports import RandomSource

logger = logging.getLogger(__name__)


class Scheduler:
    """
    Schedules items with the FSRS memory model.

    Configuration is fixed at construction. Models are injectable so tests
    and callers can substitute their own; defaults are used otherwise.
    Items are never mutated: every review returns a new Item.
    """

    def __init__(
        self,
        parameters: Sequence[float] | None = None,
        desired_retention: float | None = None,
        learning_steps: Sequence[timedelta] | None = None,
        relearning_steps: Sequence[timedelta] | None = None,
        maximum_interval: int | None = None,
        enable_fuzzing: bool | None = None,
        *,
        retrievability_model: RetrievabilityModel | None = None,
        stability_model: StabilityModel | None = None,
        difficulty_model: DifficultyModel | None = None,
        interval_model: IntervalModel | None = None,
        fuzz_model: FuzzModel | None = None,
        random_source: RandomSource | None = None,
    ):
        """
        Args:
            parameters: 21 FSRS weights; published defaults if omitted.
            desired_retention: Target recall probability in (0, 1).
            learning_steps: Step durations for new items.
            relearning_steps: Step durations after a lapse.
            maximum_interval: Upper bound on Review intervals, in days.
            enable_fuzzing: Whether Review intervals get random jitter.
            random_source: Randomness for the default FuzzModel. Ignored when
                fuzz_model is given.
        """
        options = {
            "parameters": parameters,
            "desired_retention": desired_retention,
            "learning_steps": learning_steps,
            "relearning_steps": relearning_steps,
            "maximum_interval": maximum_interval,
            "enable_fuzzing": enable_fuzzing,
        }
        self._config = SchedulerConfig(**{k: v for k, v in options.items() if v is not None})

        self._retrievability = retrievability_model or RetrievabilityModel()
        self._stability = stability_model or StabilityModel()
        self._difficulty = difficulty_model or DifficultyModel()
        self._interval = interval_model or IntervalModel()
        self._fuzz = fuzz_model or FuzzModel(random_source)

    @classmethod
    def from_config(cls, config: SchedulerConfig, **collaborators) -> "Scheduler":
        """Build a scheduler from an already validated SchedulerConfig."""
        return cls(**config.model_dump(), **collaborators)

    # ------------------------------------------------------------------
    # Read-only configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> SchedulerConfig:
        return self._config

    @property
    def parameters(self) -> tuple[float, ...]:
        return self._config.parameters

    @property
    def desired_retention(self) -> float:
        return self._config.desired_retention

    @property
    def learning_steps(self) -> tuple[timedelta, ...]:
        return self._config.learning_steps

    @property
    def relearning_steps(self) -> tuple[timedelta, ...]:
        return self._config.relearning_steps

    @property
    def maximum_interval(self) -> int:
        return self._config.maximum_interval

    @property
    def enable_fuzzing(self) -> bool:
        return self._config.enable_fuzzing

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_retrievability(self, item: Item, now: datetime | None = None) -> float:
        """
        Current recall probability of `item`, 0 if it was never reviewed.

        Raises:
            InvalidTimeBasis: `now` is naive or not UTC.
        """
        now = self._require_utc(now)
        return self._retrievability.retrievability(item, now, self.parameters)

    def review_item(
        self,
        item: Item,
        rating: Rating | int,
        now: datetime | None = None,
        duration: int | None = None,
    ) -> tuple[Item, ReviewLog]:
        """
        Process one review of `item`.

        Args:
            item: The item as the caller holds it; left untouched.
            rating: Grade given by the learner.
            now: Review time, timezone-aware UTC. Defaults to the current time.
            duration: Opaque review duration, only stored in the log.

        Returns:
            (updated item, review log)

        Raises:
            InvalidTimeBasis: `now` is naive or not UTC.
            InvalidRating: `rating` is not a known grade.
            InvalidState: the item's phase is not part of the state machine.
        """
        now = self._require_utc(now)
        rating = self._coerce_rating(rating)
        self._require_known_phase(item)

        days_since_last_review = (
            elapsed_days(item.last_review, now) if item.last_review is not None else None
        )

        memory = self._next_memory(item, rating, now, days_since_last_review)
        phase, interval = self._next_phase(item.phase, memory.stability, rating)

        if self.enable_fuzzing and isinstance(phase, Review):
            interval = self._fuzz.apply_fuzzing(interval, self.maximum_interval)

        updated = replace(
            item,
            phase=phase,
            memory=memory,
            due=now + interval,
            last_review=now,
        )

        logger.debug(
            f"Reviewed {item.item_id}: {rating.name} {item.state.name} -> "
            f"{updated.state.name}, next in {interval}"
        )

        return updated, ReviewLog(
            item_id=item.item_id,
            rating=rating,
            review_datetime=now,
            review_duration=duration,
        )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _require_utc(now: datetime | None) -> datetime:
        if now is None:
            return datetime.now(timezone.utc)
        if now.tzinfo is None or now.utcoffset() != timedelta(0):
            raise InvalidTimeBasis(f"Review datetime must be timezone-aware UTC, got {now!r}")
        return now

    @staticmethod
    def _coerce_rating(rating: Rating | int) -> Rating:
        if isinstance(rating, bool):
            raise InvalidRating(f"Unknown rating: {rating!r}")
        try:
            return Rating(rating)
        except ValueError as e:
            raise InvalidRating(f"Unknown rating: {rating!r}") from e

    @staticmethod
    def _require_known_phase(item: Item) -> None:
        if not isinstance(item.phase, (Learning, Review, Relearning)):
            raise InvalidState(f"Unknown phase for item {item.item_id}: {item.phase!r}")

    # ------------------------------------------------------------------
    # Memory update
    # ------------------------------------------------------------------

    def _next_memory(
        self,
        item: Item,
        rating: Rating,
        now: datetime,
        days_since_last_review: int | None,
    ) -> MemoryState:
        params = self.parameters

        # First review ever
        if item.memory is None:
            return MemoryState(
                stability=self._stability.initial_stability(rating, params),
                difficulty=self._difficulty.initial_difficulty(rating, params),
            )

        stability, difficulty = item.memory.stability, item.memory.difficulty

        # Same-day repeat
        if days_since_last_review is not None and days_since_last_review < 1:
            return MemoryState(
                stability=self._stability.short_term_stability(stability, rating, params),
                difficulty=self._difficulty.next_difficulty(difficulty, rating, params),
            )

        retrievability = self._retrievability.retrievability(item, now, params)
        return MemoryState(
            stability=self._stability.next_stability(
                difficulty, stability, retrievability, rating, params
            ),
            difficulty=self._difficulty.next_difficulty(difficulty, rating, params),
        )

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def _next_phase(
        self, phase: Phase, stability: float, rating: Rating
    ) -> tuple[Phase, timedelta]:
        if isinstance(phase, Learning):
            return self._step_transition(phase, self.learning_steps, stability, rating)
        if isinstance(phase, Relearning):
            return self._step_transition(phase, self.relearning_steps, stability, rating)
        if isinstance(phase, Review):
            return self._review_transition(stability, rating)
        raise InvalidState(f"Unknown phase: {phase!r}")

    def _step_transition(
        self,
        phase: Learning | Relearning,
        steps: tuple[timedelta, ...],
        stability: float,
        rating: Rating,
    ) -> tuple[Phase, timedelta]:
        """Learning and Relearning share step handling; both graduate to Review."""
        step = phase.step

        if not steps or (step >= len(steps) and rating != Rating.AGAIN):
            return self._graduate(stability)

        if rating == Rating.AGAIN:
            return type(phase)(step=0), steps[0]

        if rating == Rating.HARD:
            if step == 0 and len(steps) == 1:
                return phase, steps[0] * 1.5
            if step == 0:
                return phase, (steps[0] + steps[1]) / 2
            return phase, steps[step]

        if rating == Rating.GOOD:
            if step + 1 == len(steps):
                return self._graduate(stability)
            return type(phase)(step=step + 1), steps[step + 1]

        if rating == Rating.EASY:
            return self._graduate(stability)

        raise InvalidRating(f"Unknown rating: {rating!r}")

    def _review_transition(self, stability: float, rating: Rating) -> tuple[Phase, timedelta]:
        if rating == Rating.AGAIN and self.relearning_steps:
            return Relearning(step=0), self.relearning_steps[0]
        return Review(), self._review_interval(stability)

    def _graduate(self, stability: float) -> tuple[Phase, timedelta]:
        return Review(), self._review_interval(stability)

    def _review_interval(self, stability: float) -> timedelta:
        days = self._interval.next_interval(
            stability, self.desired_retention, self.parameters, self.maximum_interval
        )
        return timedelta(days=days)
