# Application Package
from .config import CadenceSettings, ProfileOverride, SchedulerConfig, resolve_settings
from .factory import SchedulerFactory
from .scheduler import Scheduler

__all__ = [
    "CadenceSettings",
    "ProfileOverride",
    "Scheduler",
    "SchedulerConfig",
    "SchedulerFactory",
    "resolve_settings",
]
