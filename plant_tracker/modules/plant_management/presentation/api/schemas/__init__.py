"""
Request/response schemas of the plant management API.
"""

from .auth_schemas import AuthStatusResponse, LoginRequest, RegisterRequest
from .plant_schemas import (
    CareEventCreateRequest,
    CareEventListResponse,
    CareEventResponse,
    ElapsedResponse,
    PlantCreateRequest,
    PlantDeletedResponse,
    PlantFormDefaultsResponse,
    PlantListResponse,
    PlantResponse,
    PlantUpdateRequest,
    ScheduleEntryResponse,
    ScheduleResponse,
    WaterPlantRequest,
)

__all__ = [
    "AuthStatusResponse",
    "LoginRequest",
    "RegisterRequest",
    "CareEventCreateRequest",
    "CareEventListResponse",
    "CareEventResponse",
    "ElapsedResponse",
    "PlantCreateRequest",
    "PlantDeletedResponse",
    "PlantFormDefaultsResponse",
    "PlantListResponse",
    "PlantResponse",
    "PlantUpdateRequest",
    "ScheduleEntryResponse",
    "ScheduleResponse",
    "WaterPlantRequest",
]
