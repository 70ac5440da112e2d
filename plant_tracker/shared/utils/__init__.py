# 📄 File: plant_tracker/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# A collection of helpful tools other parts of the app use, like logging and the clock.

# 🧪 Purpose (Technical Summary):
# Utilities package: structured logging (logging.py) and clock/identifier helpers (helpers.py).
# Submodules are imported directly to keep import order free of cycles.

# 🔗 Dependencies:
# - logging: Structured logging utilities
# - helpers: Clock and id helpers

# 🔄 Connected Modules / Calls From:
# Used by: All application modules

"""
Shared Utilities Package

- Structured logging with JSON formatting
- Clock, identifier and timezone helpers
"""
