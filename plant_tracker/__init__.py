# 📄 File: plant_tracker/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this folder holds the plant tracker code and records its version.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info and package metadata
# for the plant tracker FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - Package imports throughout the application

"""
Plant Tracker - plant care tracking service

Register plants, record watering and other care, and see when each plant
needs water next.
"""

__version__ = "1.0.0"
__title__ = "Plant Tracker API"
__description__ = "Plant care tracking: plants, care events and watering schedules"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
