# 📄 File: plant_tracker/modules/plant_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the parts that do the actual work: date math, the plant list, undo and the ticking clock.
# 🧪 Purpose (Technical Summary):
# Domain services package re-exporting time math functions, the care record store, the undo
# buffer, the schedule-derived status check and the cancellable ticker.
# 🔗 Dependencies:
# time_math.py, care_record_store.py, undo_buffer.py, status.py, watering_ticker.py
# 🔄 Connected Modules / Calls From:
# plant_tracker.main, plant management presentation layer, sample data seeding

from .time_math import (
    MS_PER_DAY,
    Elapsed,
    days_until,
    describe_due,
    elapsed_since,
    needs_attention,
    next_watering,
    watering_summary,
)
from .care_record_store import CareRecordStore
from .undo_buffer import DEFAULT_UNDO_WINDOW_MS, UndoBuffer
from .status import is_watering_due, status_disagrees
from .watering_ticker import StopTicker, WateringTicker, elapsed_ticker

__all__ = [
    "MS_PER_DAY",
    "Elapsed",
    "days_until",
    "describe_due",
    "elapsed_since",
    "needs_attention",
    "next_watering",
    "watering_summary",
    "CareRecordStore",
    "DEFAULT_UNDO_WINDOW_MS",
    "UndoBuffer",
    "is_watering_due",
    "status_disagrees",
    "StopTicker",
    "WateringTicker",
    "elapsed_ticker",
]
