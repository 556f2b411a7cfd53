"""Errors raised by the scheduler.

Every error is deterministic given its input; none of them are transient.
"""


class SchedulerError(ValueError):
    """Base class for all cadence scheduling errors."""


class InvalidTimeBasis(SchedulerError):
    """A review timestamp is naive or not expressed in UTC."""


class InvalidState(SchedulerError):
    """An item carries a phase or step outside the scheduler's state machine."""


class InvalidRating(SchedulerError):
    """A rating is not one of Again, Hard, Good or Easy."""


class UnknownProfile(SchedulerError):
    """A named scheduler profile does not exist in the loaded settings."""
