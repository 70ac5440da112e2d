# 📄 File: plant_tracker/modules/plant_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing side of plant management: the endpoints the app screens call.
# 🧪 Purpose (Technical Summary):
# Presentation layer package exposing the plant management API router factory and dependencies.
# 🔗 Dependencies:
# FastAPI, api.v1 routers, dependencies.py
# 🔄 Connected Modules / Calls From:
# plant_tracker.api.v1.router

from .api import create_plant_management_router

__all__ = ["create_plant_management_router"]
