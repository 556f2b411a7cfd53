"""Tests for FuzzModel."""

from datetime import timedelta

import pytest

from cadence.application.memory.fuzzing import FuzzModel
from cadence.infrastructure.random_source import StdlibRandomSource

MAX = 36500


class TestFuzzRange:
    model = FuzzModel()

    def test_thirty_days(self):
        # delta = 1 + 0.15*4.5 + 0.1*13 + 0.05*10 = 3.475
        assert self.model.fuzz_range(30, MAX) == (27, 33)

    def test_three_days_keeps_floor_of_two(self):
        assert self.model.fuzz_range(3, MAX) == (2, 4)

    def test_small_maximum_collapses_range(self):
        assert self.model.fuzz_range(30, 20) == (20, 20)


class TestApplyFuzzing:
    @pytest.mark.parametrize("interval", [timedelta(days=2), timedelta(days=2.5), timedelta(hours=10)])
    def test_short_intervals_unchanged(self, interval, fixed_random):
        model = FuzzModel(fixed_random(0.99))
        assert model.apply_fuzzing(interval, MAX) == interval

    def test_lowest_draw_gives_lower_bound(self, fixed_random):
        model = FuzzModel(fixed_random(0.0))
        assert model.apply_fuzzing(timedelta(days=30), MAX) == timedelta(days=27)

    def test_midpoint_draw(self, fixed_random):
        # 0.5 * 7 + 27 = 30.5, rounded half-to-even
        model = FuzzModel(fixed_random(0.5))
        assert model.apply_fuzzing(timedelta(days=30), MAX) == timedelta(days=30)

    def test_never_exceeds_maximum_interval(self, fixed_random):
        model = FuzzModel(fixed_random(0.0, 0.4, 0.999))
        for _ in range(3):
            assert model.apply_fuzzing(timedelta(days=30), 20) == timedelta(days=20)

    def test_uses_injected_source(self, fixed_random):
        source = fixed_random(0.25)
        FuzzModel(source).apply_fuzzing(timedelta(days=10), MAX)
        assert source.calls == 1

    def test_results_vary(self):
        model = FuzzModel(StdlibRandomSource(seed=7))
        results = {model.apply_fuzzing(timedelta(days=30), MAX) for _ in range(100)}
        assert len(results) > 1

    @pytest.mark.parametrize("days", [3, 10, 30, 100])
    def test_bounds(self, days):
        model = FuzzModel(StdlibRandomSource(seed=days))
        for _ in range(200):
            fuzzed = model.apply_fuzzing(timedelta(days=days), MAX).days
            assert 2 <= fuzzed <= MAX

    def test_fifty_days_stays_reasonable(self):
        model = FuzzModel(StdlibRandomSource(seed=1))
        results = [model.apply_fuzzing(timedelta(days=50), MAX).days for _ in range(1000)]
        assert min(results) >= 40
        assert max(results) <= 60
        assert max(results) > min(results)
