# 📄 File: plant_tracker/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Holds the settings that tell the plant tracker how to behave.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization exporting the settings class and its cached factory.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - plant_tracker.main (application startup)
# - All modules requiring configuration

"""
Configuration Management Package

Handles environment-based application settings.
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
