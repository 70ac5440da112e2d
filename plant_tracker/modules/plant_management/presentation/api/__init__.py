"""
Plant Management API

Versioned FastAPI routers and their request/response schemas.
"""

from .v1 import create_plant_management_router

__all__ = ["create_plant_management_router"]
