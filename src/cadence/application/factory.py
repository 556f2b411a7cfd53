"""
Scheduler Factory
Centralizes building Scheduler instances from settings and named profiles.
"""

import logging
from collections.abc import Sequence

from cadence.application.config import CadenceSettings, resolve_settings
from cadence.application.scheduler import Scheduler
from cadence.domain.ports import RandomSource

logger = logging.getLogger(__name__)


class SchedulerFactory:
    """
    Builds schedulers from loaded CadenceSettings.

    Each call returns a new, independent Scheduler.
    """

    def __init__(
        self,
        settings: CadenceSettings | None = None,
        random_source: RandomSource | None = None,
    ):
        """
        Args:
            settings: Loaded settings; resolved from env/config files if not provided.
            random_source: Optional randomness shared by the schedulers this factory builds.
        """
        self._settings = settings or resolve_settings()
        self._random_source = random_source

    @property
    def settings(self) -> CadenceSettings:
        return self._settings

    def profiles(self) -> list[str]:
        """Names of every profile this factory can build, sorted."""
        return self._settings.profile_names()

    def create_scheduler(
        self,
        parameters: Sequence[float] | None = None,
        desired_retention: float | None = None,
    ) -> Scheduler:
        """
        Returns a scheduler with the base configuration, optionally overriding
        the parameters and desired retention.
        """
        config = self._settings.scheduler_config()
        updates = {"parameters": parameters, "desired_retention": desired_retention}
        options = {**config.model_dump(), **{k: v for k, v in updates.items() if v is not None}}
        return Scheduler(**options, random_source=self._random_source)

    def create_scheduler_for_profile(self, name: str) -> Scheduler:
        """
        Returns a scheduler configured by the named profile.

        Raises:
            UnknownProfile: The profile is not defined in the settings.
        """
        config = self._settings.scheduler_config(name)
        logger.info(
            f"Scheduler profile '{name}': retention={config.desired_retention}, "
            f"max_interval={config.maximum_interval}, fuzzing={config.enable_fuzzing}"
        )
        return Scheduler.from_config(config, random_source=self._random_source)
