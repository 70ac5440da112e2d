# 📄 File: plant_tracker/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the plant tracker API, kept in its own section so a later version can be added
# without breaking existing screens.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1: version metadata, route prefixes and OpenAPI tags.
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# plant_tracker.api.v1.router, plant_tracker.main

"""
Plant Tracker API Version 1

Core Features:
- Placeholder sign-in flag
- Plant management (add, edit, delete with undo)
- Care recording and care history
- Watering schedule and time since last watering
"""

from typing import Any, Dict

# API v1 metadata
__version__ = "1.0.0"
__api_version__ = "v1"
__status__ = "stable"

API_V1_CONFIG = {
    "version": __version__,
    "api_version": __api_version__,
    "status": __status__,
    "description": "Plant Tracker API Version 1",
    "features": [
        "authentication_flag",
        "plant_management",
        "care_events",
        "watering_schedule",
    ],
}

# API v1 route prefixes
ROUTE_PREFIXES = {
    "auth": "/auth",
    "plants": "/plants",
    "care_events": "/care-events",
    "schedule": "/schedule",
    "health": "/health",
}

# API v1 tags for OpenAPI documentation
API_TAGS = [
    {"name": "Authentication", "description": "Placeholder sign-in flag"},
    {"name": "Plants", "description": "Plants, undo delete, care recording, elapsed time"},
    {"name": "Care Events", "description": "Care history across plants"},
    {"name": "Schedule", "description": "Upcoming waterings"},
    {"name": "Health Check", "description": "Service liveness"},
]


def get_api_info() -> Dict[str, Any]:
    """Get API v1 information and configuration"""
    return {
        "api_info": API_V1_CONFIG,
        "route_prefixes": ROUTE_PREFIXES,
        "tags": API_TAGS,
    }


__all__ = [
    "API_V1_CONFIG",
    "ROUTE_PREFIXES",
    "API_TAGS",
    "get_api_info",
]
