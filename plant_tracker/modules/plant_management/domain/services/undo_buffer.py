# 📄 File: plant_tracker/modules/plant_management/domain/services/undo_buffer.py
# 🧭 Purpose (Layman Explanation):
# Remembers the last plant you deleted for a short while (30 seconds by default) so you can
# change your mind and bring it back.
# 🧪 Purpose (Technical Summary):
# Single-slot undo buffer holding the most recently deleted Plant with a deadline; supports one
# restore into the care record store within the window and idempotent expiry.
# 🔗 Dependencies:
# care_record_store.py, plant domain models, plant_tracker.shared.utils (clock, logging)
# 🔄 Connected Modules / Calls From:
# plant API endpoints (delete / undo-delete), application lifespan expiry ticker

from datetime import datetime, timedelta
from typing import Optional, Tuple

from plant_tracker.shared.core.event_bus import EventBus
from plant_tracker.shared.core.exceptions import ValidationError
from plant_tracker.shared.utils.helpers import Clock, utc_now
from plant_tracker.shared.utils.logging import get_logger

from ..events.plant_events import PlantEventType, plant_event
from ..models.plant import Plant
from .care_record_store import CareRecordStore

logger = get_logger(__name__)

DEFAULT_UNDO_WINDOW_MS = 30_000


class UndoBuffer:
    """
    Holds at most one deleted plant until its deadline.

    Capturing a second plant discards the first for good. ``restore`` works
    while ``now <= deadline``; afterwards the entry is dropped.
    """

    def __init__(
        self,
        store: CareRecordStore,
        clock: Clock = utc_now,
        window_ms: int = DEFAULT_UNDO_WINDOW_MS,
        event_bus: Optional[EventBus] = None,
    ):
        _check_window(window_ms)
        self._store = store
        self._clock = clock
        self.window_ms = window_ms
        self._event_bus = event_bus
        self._entry: Optional[Tuple[Plant, datetime]] = None

    @property
    def has_entry(self) -> bool:
        return self._entry is not None

    @property
    def deadline(self) -> Optional[datetime]:
        return self._entry[1] if self._entry else None

    def peek(self) -> Optional[Plant]:
        """The buffered plant, without restoring it"""
        return self._entry[0] if self._entry else None

    def capture(self, plant: Plant, window_ms: Optional[int] = None) -> datetime:
        """
        Buffer ``plant`` until now + ``window_ms`` and return that deadline.

        Any plant already buffered is permanently discarded.
        """
        window_ms = self.window_ms if window_ms is None else window_ms
        _check_window(window_ms)

        if self._entry is not None:
            self._discard("replaced")

        deadline = self._clock() + timedelta(milliseconds=window_ms)
        self._entry = (plant, deadline)
        logger.debug(
            "Deleted plant buffered for undo",
            plant_id=plant.id,
            deadline=deadline.isoformat(),
        )
        return deadline

    def restore(self) -> Optional[Plant]:
        """
        Put the buffered plant back into the store.

        Returns:
            The restored plant, or None when nothing is buffered or the
            window has passed (nothing changes in that case).
        """
        if self._entry is None:
            return None

        plant, deadline = self._entry
        if self._clock() > deadline:
            self._discard("expired")
            return None

        self._store.restore_plant(plant)
        self._entry = None
        return plant

    def expire(self, now: Optional[datetime] = None) -> bool:
        """
        Drop the buffered plant if its deadline has passed.

        Safe to call any number of times; returns True only when an entry
        was dropped by this call.
        """
        if self._entry is None:
            return False

        now = now if now is not None else self._clock()
        if now > self._entry[1]:
            self._discard("expired")
            return True
        return False

    def _discard(self, reason: str) -> None:
        plant, _ = self._entry
        self._entry = None
        logger.log_business_event(
            PlantEventType.PLANT_DISCARDED.value,
            f"Deleted plant {plant.name!r} can no longer be restored ({reason})",
            entity_id=plant.id,
            entity_type="plant",
            extra={"reason": reason},
        )
        if self._event_bus is not None:
            self._event_bus.publish(plant_event(PlantEventType.PLANT_DISCARDED, plant, reason=reason))


def _check_window(window_ms: int) -> None:
    if window_ms < 0:
        raise ValidationError(
            "Undo window cannot be negative",
            field="window_ms",
            value=window_ms,
            constraint=">= 0",
        )
