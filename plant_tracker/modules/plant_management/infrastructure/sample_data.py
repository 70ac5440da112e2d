# 📄 File: plant_tracker/modules/plant_management/infrastructure/sample_data.py
# 🧭 Purpose (Layman Explanation):
# Fills an empty tracker with two example plants and a bit of care history, handy for demos.
# 🧪 Purpose (Technical Summary):
# Sample-data loader seeding the care record store relative to the store clock; enabled by the
# SEED_SAMPLE_DATA setting during application start-up.
# 🔗 Dependencies:
# plant domain models, care_record_store.py
# 🔄 Connected Modules / Calls From:
# plant_tracker.main lifespan

from datetime import timedelta
from typing import List, Tuple

from ..domain.models import CareEvent, CareEventType, Plant, PlantStatus, SunlightLevel
from ..domain.services.care_record_store import CareRecordStore


def build_sample_records(now) -> Tuple[List[Plant], List[CareEvent]]:
    """Two plants and their latest care, dated relative to ``now``."""
    monstera = Plant(
        id="sample-monstera",
        name="Monstera Deliciosa",
        species="Monstera deliciosa",
        image_url="https://images.unsplash.com/photo-1614594975525-e45190c55d0b?w=500",
        watering_frequency=7,
        sunlight=SunlightLevel.MEDIUM,
        status=PlantStatus.HEALTHY,
        last_watered=now - timedelta(days=3),
        location="Living room",
    )
    fern = Plant(
        id="sample-fern",
        name="Boston Fern",
        species="Nephrolepis exaltata",
        image_url="https://images.unsplash.com/photo-1591958911259-bee2173bdccc?w=500",
        watering_frequency=3,
        sunlight=SunlightLevel.LOW,
        status=PlantStatus.NEEDS_WATER,
        last_watered=now - timedelta(days=4),
        location="Bathroom",
    )

    events = [
        CareEvent(
            id="sample-event-water",
            plant_id=monstera.id,
            type=CareEventType.WATER,
            timestamp=monstera.last_watered,
            note="Watered in the morning",
        ),
        CareEvent(
            id="sample-event-fertilize",
            plant_id=fern.id,
            type=CareEventType.FERTILIZE,
            timestamp=now - timedelta(days=7),
            note="Added organic fertilizer",
        ),
    ]
    return [monstera, fern], events


def seed_sample_data(store: CareRecordStore) -> int:
    """
    Load the sample records into an empty store.

    Returns:
        Number of plants added (0 when the store already has plants)
    """
    if len(store):
        return 0
    plants, events = build_sample_records(store.now())
    store.seed(plants, events)
    return len(plants)
