"""Tests for cadence.application.utils.numeric."""

from datetime import datetime, timedelta, timezone

import pytest

from cadence.application.utils.numeric import clamp, clamp_min, elapsed_days

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


# ---------- Clamp ----------


@pytest.mark.parametrize(
    "value, expected",
    [(-5.0, 1.0), (1.0, 1.0), (4.2, 4.2), (10.0, 10.0), (11.5, 10.0)],
)
def test_clamp(value, expected):
    assert clamp(value, 1.0, 10.0) == expected


def test_clamp_int():
    assert clamp(0, 1, 36500) == 1
    assert clamp(40000, 1, 36500) == 36500


def test_clamp_min():
    assert clamp_min(-1.0, 0.001) == 0.001
    assert clamp_min(3.0, 0.001) == 3.0


# ---------- Elapsed days ----------


def test_elapsed_days_whole():
    assert elapsed_days(T0, T0 + timedelta(days=3)) == 3


def test_elapsed_days_truncates_partial_days():
    assert elapsed_days(T0, T0 + timedelta(days=1, hours=23)) == 1
    assert elapsed_days(T0, T0 + timedelta(minutes=10)) == 0


def test_elapsed_days_negative_truncates_toward_zero():
    assert elapsed_days(T0, T0 - timedelta(hours=12)) == 0
    assert elapsed_days(T0, T0 - timedelta(hours=36)) == -1
