# 📄 File: plant_tracker/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a package of common tools that every part of the
# plant tracker can use, like settings, logging and error types.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package for configuration, core primitives (exceptions, event bus,
# authentication flag) and utilities used throughout the application modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management
- Exception hierarchy
- Event bus
- Authentication flag
- Logging utilities
"""

__all__ = []
