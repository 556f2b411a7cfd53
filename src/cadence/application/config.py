import math
from datetime import timedelta
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from cadence.domain.constants import (
    DEFAULT_DESIRED_RETENTION,
    DEFAULT_ENABLE_FUZZING,
    DEFAULT_LEARNING_STEPS,
    DEFAULT_MAXIMUM_INTERVAL,
    DEFAULT_PARAMETERS,
    DEFAULT_PROFILE,
    DEFAULT_RELEARNING_STEPS,
    PARAMETER_COUNT,
)
from cadence.domain.errors import UnknownProfile


def _check_parameters(v: tuple[float, ...]) -> tuple[float, ...]:
    if len(v) != PARAMETER_COUNT:
        raise ValueError(f"expected {PARAMETER_COUNT} parameters, got {len(v)}")
    if not all(math.isfinite(p) for p in v):
        raise ValueError("parameters must be finite numbers")
    return v


class SchedulerConfig(BaseModel):
    """
    Immutable configuration for a single Scheduler instance.

    Validation failures raise pydantic's ValidationError (a ValueError).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    parameters: tuple[float, ...] = DEFAULT_PARAMETERS
    desired_retention: float = Field(default=DEFAULT_DESIRED_RETENTION, gt=0, lt=1)
    learning_steps: tuple[timedelta, ...] = DEFAULT_LEARNING_STEPS
    relearning_steps: tuple[timedelta, ...] = DEFAULT_RELEARNING_STEPS
    maximum_interval: int = Field(default=DEFAULT_MAXIMUM_INTERVAL, ge=1)
    enable_fuzzing: bool = DEFAULT_ENABLE_FUZZING

    @field_validator("parameters")
    @classmethod
    def validate_parameters(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        return _check_parameters(v)

    @field_validator("learning_steps", "relearning_steps")
    @classmethod
    def validate_steps(cls, v: tuple[timedelta, ...]) -> tuple[timedelta, ...]:
        if any(step < timedelta(0) for step in v):
            raise ValueError("step durations must not be negative")
        return v


class ProfileOverride(BaseModel):
    """Named overrides applied on top of the base scheduler configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    parameters: tuple[float, ...] | None = None
    desired_retention: float | None = Field(default=None, gt=0, lt=1)

    @field_validator("parameters")
    @classmethod
    def validate_parameters(cls, v: tuple[float, ...] | None) -> tuple[float, ...] | None:
        if v is None:
            return None
        return _check_parameters(v)


def _config_files() -> list[Path]:
    return [
        Path.home() / ".config/cadence/config.toml",
        Path.home() / ".cadence.toml",
    ]


class CadenceSettings(BaseSettings):
    """
    Configuration for building schedulers.
    Supports loading from:
    1. Manual overrides (keyword arguments)
    2. Environment variables (CADENCE_*, nested with "__")
    3. Config file (~/.config/cadence/config.toml or ~/.cadence.toml)
    """

    model_config = SettingsConfigDict(
        env_prefix="CADENCE_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    scheduler: SchedulerConfig = Field(default_factory=SchedulerConfig)
    profiles: dict[str, ProfileOverride] = Field(default_factory=dict)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        from pydantic_settings import TomlConfigSettingsSource

        # Only the first existing file is read
        toml_file = next((f for f in _config_files() if f.exists()), None)

        if toml_file:
            return (
                init_settings,
                env_settings,
                TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
            )
        return (
            init_settings,
            env_settings,
        )

    def profile_names(self) -> list[str]:
        return sorted({DEFAULT_PROFILE, *self.profiles})

    def scheduler_config(self, profile: str | None = None) -> SchedulerConfig:
        """
        Resolve the scheduler configuration for a named profile.

        The "default" profile is the base configuration unless the settings
        define overrides for it explicitly.
        """
        name = profile or DEFAULT_PROFILE

        if name not in self.profiles:
            if name == DEFAULT_PROFILE:
                return self.scheduler
            raise UnknownProfile(f"Unknown scheduler profile: {name!r}")

        overrides = self.profiles[name].model_dump(exclude_none=True)
        return SchedulerConfig(**{**self.scheduler.model_dump(), **overrides})


def resolve_settings(overrides: dict[str, Any] | None = None) -> CadenceSettings:
    """
    Multi-layered settings resolution.
    1. Defaults in SchedulerConfig
    2. ~/.config/cadence/config.toml (if exists)
    3. Environment variables (CADENCE_*)
    4. overrides passed by the caller
    """
    return CadenceSettings(**(overrides or {}))
