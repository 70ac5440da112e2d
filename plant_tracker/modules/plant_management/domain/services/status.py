# 📄 File: plant_tracker/modules/plant_management/domain/services/status.py
# 🧭 Purpose (Layman Explanation):
# Works out from the calendar whether a plant is due for water, next to the status you picked yourself.
# 🧪 Purpose (Technical Summary):
# Schedule-derived watering check. Plant.status stays user-controlled; this module never writes it.
# 🔗 Dependencies:
# time_math.py, plant domain model
# 🔄 Connected Modules / Calls From:
# schedule API endpoint

from datetime import datetime

from ..models.plant import Plant, PlantStatus
from .time_math import days_until, next_watering


def is_watering_due(plant: Plant, now: datetime) -> bool:
    """True when the next watering is today or overdue."""
    return days_until(next_watering(plant.last_watered, plant.watering_frequency), now) <= 0


def status_disagrees(plant: Plant, now: datetime) -> bool:
    """
    True when the manual status and the schedule tell different stories:
    the plant is due but not marked as needing water, or marked as needing
    water while not due.
    """
    due = is_watering_due(plant, now)
    marked = plant.status is PlantStatus.NEEDS_WATER
    return due != marked
