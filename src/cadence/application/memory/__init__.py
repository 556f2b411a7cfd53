# Application Memory Model Package
from .difficulty import DifficultyModel
from .fuzzing import FuzzModel
from .interval import IntervalModel
from .retrievability import RetrievabilityModel
from .stability import StabilityModel

__all__ = [
    "DifficultyModel",
    "FuzzModel",
    "IntervalModel",
    "RetrievabilityModel",
    "StabilityModel",
]
