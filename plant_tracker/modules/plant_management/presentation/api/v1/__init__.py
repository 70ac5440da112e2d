"""
Plant Management API Version 1

- Auth API (/auth): placeholder sign-in flag
- Plants API (/plants): plants, undo delete, care recording, elapsed time
- Care events API (/care-events): care history across plants
- Schedule API (/schedule): upcoming waterings
"""

from fastapi import APIRouter

from .auth import auth_router
from .care_events import care_events_router
from .plants import plants_router
from .schedule import schedule_router


def create_plant_management_router() -> APIRouter:
    """Combine the plant management routers under their prefixes."""
    router = APIRouter()
    router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    router.include_router(plants_router, prefix="/plants", tags=["Plants"])
    router.include_router(care_events_router, prefix="/care-events", tags=["Care Events"])
    router.include_router(schedule_router, prefix="/schedule", tags=["Schedule"])
    return router


__all__ = [
    "auth_router",
    "care_events_router",
    "plants_router",
    "schedule_router",
    "create_plant_management_router",
]
