"""cadence: FSRS spaced-repetition scheduling."""

from cadence.application import (
    CadenceSettings,
    ProfileOverride,
    Scheduler,
    SchedulerConfig,
    SchedulerFactory,
    resolve_settings,
)
from cadence.domain import (
    InvalidRating,
    InvalidState,
    InvalidTimeBasis,
    Item,
    Learning,
    MemoryState,
    Rating,
    Relearning,
    Review,
    ReviewLog,
    SchedulerError,
    State,
    UnknownProfile,
)
from cadence.domain.constants import DEFAULT_PARAMETERS, STABILITY_MIN

VERSION = "0.1.0"

__all__ = [
    "DEFAULT_PARAMETERS",
    "STABILITY_MIN",
    "VERSION",
    "CadenceSettings",
    "InvalidRating",
    "InvalidState",
    "InvalidTimeBasis",
    "Item",
    "Learning",
    "MemoryState",
    "ProfileOverride",
    "Rating",
    "Relearning",
    "Review",
    "ReviewLog",
    "Scheduler",
    "SchedulerConfig",
    "SchedulerError",
    "SchedulerFactory",
    "State",
    "UnknownProfile",
    "resolve_settings",
]
