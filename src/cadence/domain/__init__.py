# Domain Package
from .errors import (
    InvalidRating,
    InvalidState,
    InvalidTimeBasis,
    SchedulerError,
    UnknownProfile,
)
from .ids import generate_item_id
from .models import (
    FuzzRange,
    Item,
    Learning,
    MemoryState,
    Phase,
    Rating,
    Relearning,
    Review,
    ReviewLog,
    State,
)
from .ports import RandomSource

__all__ = [
    "FuzzRange",
    "InvalidRating",
    "InvalidState",
    "InvalidTimeBasis",
    "Item",
    "Learning",
    "MemoryState",
    "Phase",
    "RandomSource",
    "Rating",
    "Relearning",
    "Review",
    "ReviewLog",
    "SchedulerError",
    "State",
    "UnknownProfile",
    "generate_item_id",
]
