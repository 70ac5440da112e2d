# 📄 File: plant_tracker/modules/plant_management/domain/models/care_event.py
# 🧭 Purpose (Layman Explanation):
# Defines a "care event" - a note that a plant was watered, fertilized, pruned or repotted at a given time.
# 🧪 Purpose (Technical Summary):
# Immutable CareEvent domain model and CareEventType enumeration with display labels.
# 🔗 Dependencies:
# pydantic, datetime, enum
# 🔄 Connected Modules / Calls From:
# care_record_store.py, plant events, care event API schemas and endpoints

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from plant_tracker.shared.utils.helpers import ensure_utc


class CareEventType(str, Enum):
    """Kinds of care that can be recorded"""
    WATER = "water"
    FERTILIZE = "fertilize"
    PRUNE = "prune"
    REPOT = "repot"

    @property
    def label(self) -> str:
        return CARE_TYPE_LABELS[self]


CARE_TYPE_LABELS = {
    CareEventType.WATER: "Watering",
    CareEventType.FERTILIZE: "Fertilizing",
    CareEventType.PRUNE: "Pruning",
    CareEventType.REPOT: "Repotting",
}


class CareEvent(BaseModel):
    """
    One recorded care action.

    Events are created by the store only and are never edited or deleted;
    they keep pointing at their plant even after that plant is deleted.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    plant_id: str = Field(..., min_length=1)
    type: CareEventType
    timestamp: datetime
    note: Optional[str] = Field(default=None, max_length=500)

    @field_validator("timestamp")
    @classmethod
    def normalise_timestamp(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    @field_validator("note")
    @classmethod
    def blank_note_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v
