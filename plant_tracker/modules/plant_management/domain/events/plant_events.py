# 📄 File: plant_tracker/modules/plant_management/domain/events/plant_events.py
# 🧭 Purpose (Layman Explanation):
# Names the things that can happen to a plant - added, edited, deleted, restored, cared for -
# so other parts of the app can react when they happen.
# 🧪 Purpose (Technical Summary):
# Domain event types and factory functions building DomainEvent instances for plant and
# care-event lifecycle changes published by the care record store and the undo buffer.
# 🔗 Dependencies:
# plant_tracker.shared.core.event_bus, plant domain models
# 🔄 Connected Modules / Calls From:
# care_record_store.py, undo_buffer.py, event bus subscribers

from enum import Enum
from typing import Any, Dict

from plant_tracker.shared.core.event_bus import DomainEvent

from ..models.care_event import CareEvent
from ..models.plant import Plant


class PlantEventType(str, Enum):
    PLANT_CREATED = "plant.created"
    PLANT_UPDATED = "plant.updated"
    PLANT_DELETED = "plant.deleted"
    PLANT_RESTORED = "plant.restored"
    PLANT_DISCARDED = "plant.discarded"
    CARE_EVENT_RECORDED = "care_event.recorded"


def _plant_payload(plant: Plant) -> Dict[str, Any]:
    return plant.model_dump(mode="json")


def plant_event(event_type: PlantEventType, plant: Plant, **extra: Any) -> DomainEvent:
    """
    Build an event about ``plant``.

    The payload is the JSON form of the plant plus any ``extra`` values.
    """
    return DomainEvent(
        event_type=event_type.value,
        aggregate_id=plant.id,
        aggregate_type="plant",
        payload={"plant": _plant_payload(plant), **extra},
    )


def care_event_recorded(event: CareEvent, plant: Plant) -> DomainEvent:
    return DomainEvent(
        event_type=PlantEventType.CARE_EVENT_RECORDED.value,
        aggregate_id=plant.id,
        aggregate_type="plant",
        payload={
            "care_event": event.model_dump(mode="json"),
            "plant": _plant_payload(plant),
        },
    )
