# 📄 File: plant_tracker/modules/plant_management/domain/events/__init__.py
# 🧭 Purpose (Layman Explanation):
# The list of things that can happen to plants that other parts of the app may listen for.
# 🧪 Purpose (Technical Summary):
# Re-exports plant domain event types and factories.
# 🔗 Dependencies:
# plant_events.py
# 🔄 Connected Modules / Calls From:
# Domain services, event bus subscribers

from .plant_events import PlantEventType, care_event_recorded, plant_event

__all__ = [
    "PlantEventType",
    "care_event_recorded",
    "plant_event",
]
