# 📄 File: plant_tracker/modules/plant_management/domain/models/plant.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "plant" is in the tracker - its name, species, photo, how often it needs water,
# how much light it likes, how it is doing and when it was last watered.
# 🧪 Purpose (Technical Summary):
# Domain models for the Plant entity: PlantData (the editable field set submitted by the add/edit
# forms) and Plant (PlantData plus the store-assigned identifier), with field validation.
# 🔗 Dependencies:
# pydantic, datetime, enum, plant_tracker.shared.core.exceptions, plant_tracker.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# care_record_store.py, undo_buffer.py, status.py, plant API schemas and endpoints

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from plant_tracker.shared.core.exceptions import validation_error_from_pydantic
from plant_tracker.shared.utils.helpers import ensure_utc, utc_now

DEFAULT_WATERING_FREQUENCY = 7


class SunlightLevel(str, Enum):
    """How much light the plant wants"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def label(self) -> str:
        return SUNLIGHT_LABELS[self]


class PlantStatus(str, Enum):
    """
    Health status shown on the plant card.

    Set by the user through the forms; never computed from the watering
    schedule (see status.is_watering_due for the computed view).
    """
    HEALTHY = "healthy"
    NEEDS_WATER = "needs-water"
    NORMAL = "normal"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


SUNLIGHT_LABELS = {
    SunlightLevel.LOW: "Low light",
    SunlightLevel.MEDIUM: "Moderate light",
    SunlightLevel.HIGH: "Bright light",
}

STATUS_LABELS = {
    PlantStatus.HEALTHY: "Healthy",
    PlantStatus.NEEDS_WATER: "Needs water",
    PlantStatus.NORMAL: "Normal",
}


class PlantData(BaseModel):
    """
    Every editable field of a plant.

    This is what the add form creates and what the edit form replaces
    wholesale; the identifier is never part of it.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=120)
    species: str = Field(..., min_length=1, max_length=120)
    image_url: str = Field(..., min_length=1, max_length=2048)
    watering_frequency: int = Field(default=DEFAULT_WATERING_FREQUENCY, ge=1)
    sunlight: SunlightLevel = SunlightLevel.MEDIUM
    status: PlantStatus = PlantStatus.HEALTHY
    last_watered: datetime = Field(default_factory=utc_now)
    location: Optional[str] = Field(default=None, max_length=120)

    @field_validator("last_watered")
    @classmethod
    def normalise_last_watered(cls, v: datetime) -> datetime:
        """Store every instant as aware UTC"""
        return ensure_utc(v)

    @field_validator("location")
    @classmethod
    def blank_location_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v

    @classmethod
    def parse_form(cls, data: Union["PlantData", Mapping[str, Any]]) -> "PlantData":
        """
        Build PlantData from submitted form values.

        Raises:
            ValidationError: (the application one) when any field is malformed
        """
        if isinstance(data, PlantData):
            return cls.model_validate(data.model_dump())
        try:
            return cls.model_validate(dict(data))
        except PydanticValidationError as e:
            raise validation_error_from_pydantic(e, message="Invalid plant data") from e


class Plant(PlantData):
    """
    A registered plant.

    Instances are immutable; edits produce a new instance with the same id.
    """

    id: str = Field(..., min_length=1)

    @classmethod
    def from_data(cls, plant_id: str, data: PlantData) -> "Plant":
        return cls(id=plant_id, **data.model_dump())

    def with_last_watered(self, when: datetime) -> "Plant":
        return self.model_copy(update={"last_watered": ensure_utc(when)})

    def summary(self) -> Dict[str, Any]:
        """Short form used in log records"""
        return {
            "plant_id": self.id,
            "name": self.name,
            "watering_frequency": self.watering_frequency,
        }
