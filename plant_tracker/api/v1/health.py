# 📄 File: plant_tracker/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# A quick "are you alive?" check for the plant tracker, plus how many plants it is holding.
# 🧪 Purpose (Technical Summary):
# Liveness endpoint reporting service name, version, uptime and in-memory collection sizes.
# 🔗 Dependencies:
# FastAPI, plant_tracker.shared.config.settings, plant management dependencies
# 🔄 Connected Modules / Calls From:
# plant_tracker.api.v1.router, monitoring systems

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from plant_tracker.modules.plant_management.domain.services.care_record_store import CareRecordStore
from plant_tracker.modules.plant_management.domain.services.undo_buffer import UndoBuffer
from plant_tracker.modules.plant_management.presentation.dependencies import (
    get_app_settings,
    get_store,
    get_undo_buffer,
)
from plant_tracker.shared.config.settings import Settings
from plant_tracker.shared.utils.logging import SERVICE_NAME

# Create router for health endpoints
health_router = APIRouter()

# Application start time for uptime calculation
_app_start_time = datetime.now(timezone.utc)


@health_router.get("/health",
                   summary="Basic Health Check",
                   description="Liveness check for load balancers and monitoring",
                   tags=["Health Check"])
async def health_check(
    settings: Settings = Depends(get_app_settings),
    store: CareRecordStore = Depends(get_store),
    undo_buffer: UndoBuffer = Depends(get_undo_buffer),
) -> JSONResponse:
    """
    Basic health check endpoint

    Not behind the authentication flag. Counts come from the in-memory
    store, so a healthy answer also means the store is reachable.
    """
    now = datetime.now(timezone.utc)
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": now.isoformat(),
            "service": SERVICE_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "uptime_seconds": round((now - _app_start_time).total_seconds(), 3),
            "plants": len(store),
            "care_events": len(store.list_events()),
            "undo_pending": undo_buffer.has_entry,
        }
    )
