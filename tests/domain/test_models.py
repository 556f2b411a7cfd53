"""Tests for the domain models, ids and constants."""

import dataclasses
from datetime import datetime, timezone

import pytest

from cadence.domain.constants import DEFAULT_PARAMETERS, FUZZ_RANGES, PARAMETER_COUNT
from cadence.domain.errors import InvalidState, SchedulerError
from cadence.domain.ids import generate_item_id
from cadence.domain.models import (
    Item,
    Learning,
    MemoryState,
    Rating,
    Relearning,
    Review,
    ReviewLog,
    State,
)


class TestItem:
    def test_new_item_defaults(self):
        before = datetime.now(timezone.utc)
        item = Item()

        assert item.state == State.LEARNING
        assert item.step == 0
        assert item.memory is None
        assert item.stability is None
        assert item.difficulty is None
        assert item.last_review is None
        assert item.due >= before
        assert item.due <= datetime.now(timezone.utc)

    def test_items_get_distinct_ids(self):
        assert Item().item_id != Item().item_id

    def test_item_is_frozen(self):
        item = Item()
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.due = datetime.now(timezone.utc)

    def test_review_phase_has_no_step(self):
        item = Item(phase=Review(), memory=MemoryState(stability=3.0, difficulty=5.0))
        assert item.state == State.REVIEW
        assert item.step is None
        assert item.stability == 3.0
        assert item.difficulty == 5.0

    def test_relearning_phase_exposes_step(self):
        item = Item(phase=Relearning(step=1))
        assert item.state == State.RELEARNING
        assert item.step == 1


class TestPhases:
    @pytest.mark.parametrize("phase_type", [Learning, Relearning])
    def test_negative_step_rejected(self, phase_type):
        with pytest.raises(InvalidState):
            phase_type(step=-1)

    @pytest.mark.parametrize("bad_step", [1.5, "0", None, True])
    def test_non_integer_step_rejected(self, bad_step):
        with pytest.raises(InvalidState):
            Learning(step=bad_step)

    def test_invalid_state_is_a_value_error(self):
        assert issubclass(InvalidState, SchedulerError)
        assert issubclass(InvalidState, ValueError)


class TestReviewLog:
    def test_review_log_is_immutable(self):
        log = ReviewLog(
            item_id="abc",
            rating=Rating.GOOD,
            review_datetime=datetime(2024, 1, 1, tzinfo=timezone.utc),
            review_duration=1500,
        )
        assert log.review_duration == 1500
        with pytest.raises(dataclasses.FrozenInstanceError):
            log.rating = Rating.AGAIN

    def test_duration_is_optional(self):
        log = ReviewLog("abc", Rating.EASY, datetime(2024, 1, 1, tzinfo=timezone.utc))
        assert log.review_duration is None


def test_rating_values_are_ordinal():
    assert [int(r) for r in Rating] == [1, 2, 3, 4]
    assert Rating.GOOD - 3 == 0


def test_generate_item_id_is_ulid():
    item_id = generate_item_id()
    assert len(item_id) == 26
    assert item_id != generate_item_id()


def test_default_parameters_shape():
    assert len(DEFAULT_PARAMETERS) == PARAMETER_COUNT == 21
    assert DEFAULT_PARAMETERS[20] == 0.2


def test_fuzz_ranges_are_contiguous():
    for prev, nxt in zip(FUZZ_RANGES, FUZZ_RANGES[1:]):
        assert prev.end == nxt.start
    assert FUZZ_RANGES[-1].end == float("inf")


def test_memory_state_equality():
    assert MemoryState(1.0, 2.0) == MemoryState(stability=1.0, difficulty=2.0)
