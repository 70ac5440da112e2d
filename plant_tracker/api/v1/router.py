# 📄 File: plant_tracker/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The traffic director for version 1 requests: plant requests go to the plant handlers,
# sign-in requests to the sign-in handlers, health checks to the health check.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation combining the health router and the plant management module
# routers under their prefixes, plus a version information endpoint.
# 🔗 Dependencies:
# FastAPI, plant_tracker.api.v1.health, plant_tracker.modules.plant_management.presentation
# 🔄 Connected Modules / Calls From:
# plant_tracker.main

from typing import Any, Dict

from fastapi import APIRouter

from plant_tracker.modules.plant_management import get_module_config, get_module_info
from plant_tracker.modules.plant_management.presentation import create_plant_management_router
from plant_tracker.shared.utils.logging import get_logger

from . import get_api_info
from .health import health_router

logger = get_logger(__name__)

# Create main API v1 router
api_v1_router = APIRouter()

# Include health check router (no prefix - direct access)
api_v1_router.include_router(health_router)

# =========================================================================
# MODULE ROUTER INCLUDES
# =========================================================================

api_v1_router.include_router(create_plant_management_router())
logger.debug("Plant management routers loaded")


# =========================================================================
# API V1 INFO ENDPOINT
# =========================================================================

@api_v1_router.get("/",
                   summary="API v1 Information",
                   description="Get API v1 version information and available modules",
                   tags=["API Info"])
async def api_v1_info() -> Dict[str, Any]:
    return {
        **get_api_info(),
        "documentation": {
            "openapi_schema": "/openapi.json",
            "swagger_ui": "/docs",
            "redoc": "/redoc",
        },
        "available_modules": _get_available_modules(),
    }


def _get_available_modules() -> Dict[str, Any]:
    """Modules mounted on this router"""
    info = get_module_info()
    return {info["name"]: {**info, "config": get_module_config()}}
