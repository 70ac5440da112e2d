# 📄 File: plant_tracker/modules/plant_management/presentation/api/schemas/plant_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what the plant endpoints accept and send back: the add/edit plant form, a care
# entry, the watering schedule and the "time since last watering" counter.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the plant management API with conversion helpers
# from domain models (Plant, CareEvent, Elapsed) to response payloads.
# 🔗 Dependencies:
# pydantic, plant domain models, time_math.py, status.py
# 🔄 Connected Modules / Calls From:
# plant management API v1 endpoints, FastAPI request validation and response serialization

"""
Plant Management API Schemas

Request Schemas:
- PlantCreateRequest: add-plant form
- PlantUpdateRequest: edit-plant form (full replacement)
- CareEventCreateRequest: record care for a plant
- WaterPlantRequest: "water now" with an optional note

Response Schemas:
- PlantResponse, PlantListResponse
- PlantFormDefaultsResponse: pre-filled values of the add-plant form
- PlantDeletedResponse: removed plant plus the undo deadline
- CareEventResponse, CareEventListResponse
- ElapsedResponse: time since last watering
- ScheduleEntryResponse, ScheduleResponse: upcoming waterings
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ....domain.models import (
    DEFAULT_WATERING_FREQUENCY,
    CareEvent,
    CareEventType,
    Plant,
    PlantStatus,
    SunlightLevel,
)
from ....domain.services.status import is_watering_due, status_disagrees
from ....domain.services.time_math import Elapsed, next_watering, watering_summary


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class PlantCreateRequest(BaseModel):
    """
    Add-plant form.

    Defaults mirror the form: configured watering frequency (weekly unless
    changed), medium light, healthy, watered now.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "name": "Living room fern",
                "species": "Nephrolepis exaltata",
                "image_url": "https://example.com/fern.jpg",
                "watering_frequency": 3,
                "sunlight": "low",
                "status": "healthy",
                "last_watered": "2024-05-01T08:00:00Z",
                "location": "Living room",
            }
        },
    )

    name: str = Field(..., min_length=1, max_length=120, description="Plant name")
    species: str = Field(..., min_length=1, max_length=120, description="Species")
    image_url: str = Field(..., min_length=1, max_length=2048, description="Image URL")
    watering_frequency: Optional[int] = Field(
        default=None, ge=1, description="Days between waterings; defaults to the configured frequency"
    )
    sunlight: SunlightLevel = Field(default=SunlightLevel.MEDIUM)
    status: PlantStatus = Field(default=PlantStatus.HEALTHY)
    last_watered: Optional[datetime] = Field(
        default=None, description="Last watering; defaults to now"
    )
    location: Optional[str] = Field(default=None, max_length=120)

    def to_form_data(
        self, now: datetime, default_frequency: int = DEFAULT_WATERING_FREQUENCY
    ) -> Dict[str, Any]:
        data = self.model_dump()
        if data["watering_frequency"] is None:
            data["watering_frequency"] = default_frequency
        if data["last_watered"] is None:
            data["last_watered"] = now
        return data


class PlantUpdateRequest(PlantCreateRequest):
    """Edit-plant form. Every field is replaced, so frequency and last_watered must be sent."""

    watering_frequency: int = Field(..., ge=1, description="Days between waterings")
    last_watered: datetime = Field(..., description="Last watering")


class CareEventCreateRequest(BaseModel):
    type: CareEventType
    note: Optional[str] = Field(default=None, max_length=500)


class WaterPlantRequest(BaseModel):
    note: Optional[str] = Field(default=None, max_length=500)


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class PlantResponse(BaseModel):
    id: str
    name: str
    species: str
    image_url: str
    watering_frequency: int
    sunlight: SunlightLevel
    sunlight_label: str
    status: PlantStatus
    status_label: str
    last_watered: datetime
    location: Optional[str] = None
    next_watering: datetime

    @classmethod
    def from_domain(cls, plant: Plant) -> "PlantResponse":
        return cls(
            **plant.model_dump(),
            sunlight_label=plant.sunlight.label,
            status_label=plant.status.label,
            next_watering=next_watering(plant.last_watered, plant.watering_frequency),
        )


class PlantListResponse(BaseModel):
    plants: List[PlantResponse]
    total: int


class PlantFormDefaultsResponse(BaseModel):
    watering_frequency: int
    sunlight: SunlightLevel
    status: PlantStatus
    last_watered: datetime


class PlantDeletedResponse(BaseModel):
    plant: PlantResponse
    undo_deadline: datetime
    undo_window_ms: int
    message: str = "Plant removed"


class CareEventResponse(BaseModel):
    id: str
    plant_id: str
    plant_name: Optional[str] = Field(
        default=None, description="None when the plant has been deleted"
    )
    type: CareEventType
    type_label: str
    timestamp: datetime
    note: Optional[str] = None

    @classmethod
    def from_domain(cls, event: CareEvent, plant: Optional[Plant] = None) -> "CareEventResponse":
        return cls(
            id=event.id,
            plant_id=event.plant_id,
            plant_name=plant.name if plant else None,
            type=event.type,
            type_label=event.type.label,
            timestamp=event.timestamp,
            note=event.note,
        )


class CareEventListResponse(BaseModel):
    events: List[CareEventResponse]
    total: int


class ElapsedResponse(BaseModel):
    plant_id: str
    last_watered: datetime
    as_of: datetime
    days: int
    hours: int
    minutes: int
    seconds: int

    @classmethod
    def from_elapsed(
        cls, plant: Plant, elapsed: Elapsed, as_of: datetime
    ) -> "ElapsedResponse":
        return cls(
            plant_id=plant.id,
            last_watered=plant.last_watered,
            as_of=as_of,
            **elapsed.as_dict(),
        )


class ScheduleEntryResponse(BaseModel):
    plant_id: str
    name: str
    image_url: str
    status: PlantStatus
    status_label: str
    next_watering: datetime
    days_until: int
    label: str = Field(..., description="due today / due tomorrow / due in N days")
    needs_attention: bool = Field(..., description="Due tomorrow, today or overdue")
    watering_due: bool = Field(..., description="Due today or overdue per the schedule")
    status_disagrees: bool = Field(
        ..., description="Manual status and schedule disagree about needing water"
    )

    @classmethod
    def from_domain(cls, plant: Plant, now: datetime) -> "ScheduleEntryResponse":
        summary = watering_summary(plant.last_watered, plant.watering_frequency, now)
        return cls(
            plant_id=plant.id,
            name=plant.name,
            image_url=plant.image_url,
            status=plant.status,
            status_label=plant.status.label,
            watering_due=is_watering_due(plant, now),
            status_disagrees=status_disagrees(plant, now),
            **summary,
        )


class ScheduleResponse(BaseModel):
    as_of: datetime
    entries: List[ScheduleEntryResponse]
