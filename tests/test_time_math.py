"""
Tests for watering time arithmetic.
"""

from datetime import timedelta

import pytest

from plant_tracker.modules.plant_management.domain.services.time_math import (
    MS_PER_DAY,
    Elapsed,
    days_until,
    describe_due,
    elapsed_since,
    needs_attention,
    next_watering,
    to_milliseconds,
    watering_summary,
)
from plant_tracker.shared.core.exceptions import ValidationError

from tests.factories import D0


def ms(value: int) -> timedelta:
    return timedelta(milliseconds=value)


class TestElapsedSince:
    def test_same_instant_is_zero(self):
        assert elapsed_since(D0, D0) == Elapsed(0, 0, 0, 0)

    def test_decomposes_into_days_hours_minutes_seconds(self):
        assert elapsed_since(D0, D0 + ms(90_061_000)) == Elapsed(1, 1, 1, 1)

    def test_partial_seconds_are_dropped(self):
        assert elapsed_since(D0, D0 + ms(59_999)) == Elapsed(0, 0, 0, 59)

    def test_future_reference_counts_as_nothing(self):
        assert elapsed_since(D0 + timedelta(hours=5), D0) == Elapsed(0, 0, 0, 0)

    def test_many_days(self):
        elapsed = elapsed_since(D0, D0 + timedelta(days=40, hours=23, minutes=59, seconds=59))
        assert elapsed.as_dict() == {"days": 40, "hours": 23, "minutes": 59, "seconds": 59}


class TestNextWatering:
    @pytest.mark.parametrize("frequency", [1, 3, 7, 30])
    def test_adds_whole_days(self, frequency):
        assert to_milliseconds(next_watering(D0, frequency) - D0) == frequency * MS_PER_DAY

    @pytest.mark.parametrize("frequency", [0, -1, 2.5, True, "3", None])
    def test_rejects_invalid_frequency(self, frequency):
        with pytest.raises(ValidationError) as exc_info:
            next_watering(D0, frequency)
        assert exc_info.value.details["field"] == "watering_frequency"


class TestDaysUntil:
    @pytest.mark.parametrize(
        "offset, expected",
        [
            (timedelta(0), 0),
            (timedelta(days=1), 1),
            (timedelta(days=-1), -1),
            (ms(-1), 0),
            (ms(1), 1),
            (timedelta(days=1) + ms(1), 2),
            (timedelta(days=-2) + ms(1), -1),
            (timedelta(days=-10), -10),
            (timedelta(microseconds=500), 1),
            (timedelta(microseconds=-500), 0),
            (timedelta(days=1, microseconds=1), 2),
        ],
    )
    def test_rounds_up_to_whole_days(self, offset, expected):
        assert days_until(D0 + offset, D0) == expected

    def test_overdue_is_not_clamped(self):
        assert days_until(D0 - timedelta(days=3, hours=1), D0) == -3


class TestDueLabels:
    @pytest.mark.parametrize(
        "days, label",
        [(-4, "due today"), (0, "due today"), (1, "due tomorrow"), (2, "due in 2 days"), (9, "due in 9 days")],
    )
    def test_describe_due(self, days, label):
        assert describe_due(days) == label

    def test_needs_attention_up_to_tomorrow(self):
        assert needs_attention(-2)
        assert needs_attention(0)
        assert needs_attention(1)
        assert not needs_attention(2)


def test_watering_summary_for_overdue_fern():
    # Watered at D0 every 3 days, looked at 4 days later
    summary = watering_summary(D0, 3, D0 + timedelta(days=4))

    assert summary["next_watering"] == D0 + timedelta(days=3)
    assert summary["days_until"] == -1
    assert summary["label"] == "due today"
    assert summary["needs_attention"] is True


def test_watering_after_watering_resets_schedule():
    watered_again = D0 + timedelta(days=2)
    next_at = next_watering(watered_again, 3)

    assert next_at == D0 + timedelta(days=5)
    assert days_until(next_at, watered_again) == 3
