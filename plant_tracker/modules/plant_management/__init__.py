# 📄 File: plant_tracker/modules/plant_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes everything about your plants: registering them, logging their care and
# working out when each needs water next.
# 🧪 Purpose (Technical Summary):
# Package initialization for the plant management module, layered as domain (models, services,
# events), infrastructure (sample data) and presentation (FastAPI routes and schemas).
# 🔗 Dependencies:
# FastAPI, pydantic, plant_tracker.shared.core
# 🔄 Connected Modules / Calls From:
# plant_tracker.main, plant_tracker.api.v1.router

"""
Plant Management Module

Handles:
- Plant registration, editing and deletion with undo
- Care event recording (water, fertilize, prune, repot)
- Watering schedule and elapsed-time calculations

Architecture:
- Domain: Core business logic and entities
- Infrastructure: Sample data
- Presentation: API endpoints and request/response schemas
"""

from typing import Any, Dict

__version__ = "1.0.0"
__module_name__ = "plant_management"
__description__ = "Plant registration, care history and watering schedule"

PLANT_MANAGEMENT_CONFIG = {
    "version": __version__,
    "module_name": __module_name__,
    "description": __description__,
    "care_event_types": ["water", "fertilize", "prune", "repot"],
    "sunlight_levels": ["low", "medium", "high"],
    "statuses": ["healthy", "needs-water", "normal"],
}


def get_module_config() -> Dict[str, Any]:
    """Plant management module configuration."""
    return PLANT_MANAGEMENT_CONFIG.copy()


def get_module_info() -> Dict[str, str]:
    return {
        "name": __module_name__,
        "version": __version__,
        "description": __description__,
    }


__all__ = [
    "__version__",
    "__module_name__",
    "__description__",
    "PLANT_MANAGEMENT_CONFIG",
    "get_module_config",
    "get_module_info",
]
