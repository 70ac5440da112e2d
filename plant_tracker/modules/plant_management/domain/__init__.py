# 📄 File: plant_tracker/modules/plant_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The core rules of plant care tracking - what a plant is, how watering dates are worked out,
# and how plants are added, edited, deleted and restored.
# 🧪 Purpose (Technical Summary):
# Domain layer initialization containing entities, domain services and domain events for
# plant management.
# 🔗 Dependencies:
# Domain models, services, events from subpackages
# 🔄 Connected Modules / Calls From:
# Infrastructure layer, Presentation layer, application factory

"""
Plant Management Domain Layer

Domain Models:
- Plant / PlantData: registered plants and their editable fields
- CareEvent: immutable record of care given to a plant

Domain Services:
- time_math: elapsed time, next watering, days until
- CareRecordStore: plant and care-event collections
- UndoBuffer: single-slot restore of the last deleted plant
- WateringTicker: cancellable periodic tick

Business Rules Enforced:
- Watering frequency of at least one day
- Watering events move last_watered together with the event (atomic)
- Care events are never edited or deleted
- Status is set by the user, never derived
"""

from .models import (
    CareEvent,
    CareEventType,
    Plant,
    PlantData,
    PlantStatus,
    SunlightLevel,
)
from .services import CareRecordStore, UndoBuffer, WateringTicker
from .events import PlantEventType

__all__ = [
    "CareEvent",
    "CareEventType",
    "Plant",
    "PlantData",
    "PlantStatus",
    "SunlightLevel",
    "CareRecordStore",
    "UndoBuffer",
    "WateringTicker",
    "PlantEventType",
]
