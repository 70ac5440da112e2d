# 📄 File: plant_tracker/modules/plant_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the data models of the tracker: plants and the care given to them.
# 🧪 Purpose (Technical Summary):
# Package initialization re-exporting the Plant and CareEvent entities with their enums.
# 🔗 Dependencies:
# plant.py, care_event.py
# 🔄 Connected Modules / Calls From:
# Domain services, presentation schemas and endpoints

from .plant import (
    DEFAULT_WATERING_FREQUENCY,
    Plant,
    PlantData,
    STATUS_LABELS,
    SUNLIGHT_LABELS,
    PlantStatus,
    SunlightLevel,
)
from .care_event import CARE_TYPE_LABELS, CareEvent, CareEventType

__all__ = [
    "DEFAULT_WATERING_FREQUENCY",
    "Plant",
    "PlantData",
    "PlantStatus",
    "SunlightLevel",
    "STATUS_LABELS",
    "SUNLIGHT_LABELS",
    "CARE_TYPE_LABELS",
    "CareEvent",
    "CareEventType",
]
