from datetime import datetime, timezone

import pytest

from cadence.application.scheduler import Scheduler
from cadence.domain.models import Item
from cadence.domain.ports import RandomSource


class FixedRandomSource(RandomSource):
    """Deterministic RandomSource that cycles through the given values."""

    def __init__(self, *values: float):
        self.values = values or (0.5,)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def review_start():
    """Fixed UTC reference time used by the scheduling scenarios."""
    return datetime(2022, 11, 29, 12, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def scheduler():
    """Scheduler with default configuration and fuzzing disabled."""
    return Scheduler(enable_fuzzing=False)


@pytest.fixture
def new_item(review_start):
    """A brand-new item due at the reference time."""
    return Item(due=review_start)


@pytest.fixture
def fixed_random():
    return FixedRandomSource


@pytest.fixture
def mock_home(tmp_path, monkeypatch):
    """Mocks Path.home() to point to a temp dir."""
    home = tmp_path / "home"
    home.mkdir()

    # Mocking HOME to a temp directory to isolate config files
    monkeypatch.setenv("HOME", str(home))
    for key in ("CADENCE_SCHEDULER", "CADENCE_PROFILES"):
        monkeypatch.delenv(key, raising=False)
    return home
