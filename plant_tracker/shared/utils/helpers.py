# 📄 File: plant_tracker/shared/utils/helpers.py

# 🧭 Purpose (Layman Explanation):
# Small shared tools: reading the current time, making new unique IDs,
# and making sure every date the app handles carries a timezone.

# 🧪 Purpose (Technical Summary):
# Clock and identifier helpers injected into the domain services so time and ids can be
# substituted in tests, plus UTC normalisation for datetimes.

# 🔗 Dependencies:
# - uuid: Unique identifier generation
# - datetime: Timezone-aware timestamps

# 🔄 Connected Modules / Calls From:
# Used by: plant models (timestamp normalisation), care record store, undo buffer, API routes

from datetime import datetime, timezone
from typing import Callable
from uuid import uuid4

# A clock returns the current instant as an aware datetime
Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def utc_now() -> datetime:
    """Current instant in UTC."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """
    Generate a unique record identifier.

    Returns:
        32 character hex string
    """
    return uuid4().hex


def ensure_utc(value: datetime) -> datetime:
    """
    Return ``value`` as an aware datetime in UTC.

    Naive datetimes are taken to already be in UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
