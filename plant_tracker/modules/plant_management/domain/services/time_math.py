# 📄 File: plant_tracker/modules/plant_management/domain/services/time_math.py
# 🧭 Purpose (Layman Explanation):
# The date calculations of the tracker: how long ago a plant was watered, when it needs
# water next, and how many days are left until then.
# 🧪 Purpose (Technical Summary):
# Pure functions over timezone-aware datetimes working in whole milliseconds: elapsed-time
# decomposition, next watering instant, ceiling day difference and the due-label policy.
# 🔗 Dependencies:
# datetime, typing, plant_tracker.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# status.py, schedule and plant API endpoints, watering ticker consumers

"""
Watering time arithmetic.

All calculations are done on integer milliseconds so results never depend on
floating point rounding:

    elapsed_since(reference, now)   -> Elapsed(days, hours, minutes, seconds)
    next_watering(last, frequency)  -> last + frequency days
    days_until(target, now)         -> ceil((target - now) / 1 day), may be <= 0
    describe_due(days)              -> "due today" / "due tomorrow" / "due in N days"
"""

from datetime import datetime, timedelta
from typing import Any, Dict, NamedTuple

from plant_tracker.shared.core.exceptions import ValidationError

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

_ONE_MS = timedelta(milliseconds=1)
_ONE_DAY = timedelta(milliseconds=MS_PER_DAY)


class Elapsed(NamedTuple):
    """Duration split into whole days, hours, minutes and seconds"""
    days: int
    hours: int
    minutes: int
    seconds: int

    def as_dict(self) -> Dict[str, int]:
        return self._asdict()


def to_milliseconds(delta: timedelta) -> int:
    """Whole milliseconds in ``delta``, rounded towards negative infinity."""
    return delta // _ONE_MS


def elapsed_since(reference: datetime, now: datetime) -> Elapsed:
    """
    Time passed from ``reference`` to ``now``.

    A reference in the future counts as no time passed.
    """
    total = max(0, to_milliseconds(now - reference))

    return Elapsed(
        days=total // MS_PER_DAY,
        hours=(total % MS_PER_DAY) // MS_PER_HOUR,
        minutes=(total % MS_PER_HOUR) // MS_PER_MINUTE,
        seconds=(total % MS_PER_MINUTE) // MS_PER_SECOND,
    )


def next_watering(last_watered: datetime, frequency_days: int) -> datetime:
    """
    Instant the next watering is due.

    Raises:
        ValidationError: if ``frequency_days`` is not an integer of at least 1
    """
    if isinstance(frequency_days, bool) or not isinstance(frequency_days, int) or frequency_days < 1:
        raise ValidationError(
            "Watering frequency must be a whole number of days, at least 1",
            field="watering_frequency",
            value=frequency_days,
            constraint="integer >= 1"
        )

    return last_watered + timedelta(milliseconds=frequency_days * MS_PER_DAY)


def days_until(target: datetime, now: datetime) -> int:
    """
    Whole days from ``now`` to ``target``, rounded up.

    Zero means due today and negative values mean overdue; nothing is clamped.
    The ceiling is taken on the exact difference, so a target 500 microseconds
    ahead is still one day away.
    """
    return -((now - target) // _ONE_DAY)


def describe_due(days: int) -> str:
    """Label for a days_until value: <= 0 today, 1 tomorrow, otherwise in N days."""
    if days <= 0:
        return "due today"
    if days == 1:
        return "due tomorrow"
    return f"due in {days} days"


def needs_attention(days: int) -> bool:
    """Schedule rows due today, overdue or due tomorrow are highlighted."""
    return days <= 1


def watering_summary(last_watered: datetime, frequency_days: int, now: datetime) -> Dict[str, Any]:
    """Everything the schedule view shows for one plant."""
    next_at = next_watering(last_watered, frequency_days)
    days = days_until(next_at, now)
    return {
        "next_watering": next_at,
        "days_until": days,
        "label": describe_due(days),
        "needs_attention": needs_attention(days),
    }
