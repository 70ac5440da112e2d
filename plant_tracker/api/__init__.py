# 📄 File: plant_tracker/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a package: versioned routes and the request middleware live here.
# 🧪 Purpose (Technical Summary):
# Package initialization for the application-level API layer (v1 router aggregation, middleware).
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# plant_tracker.main

"""
Plant Tracker API Package

Structure:
    api/
    ├── __init__.py          # This file
    ├── middleware/
    │   └── logging.py       # Request logging with request ids
    └── v1/
        ├── __init__.py
        ├── router.py        # Main v1 router
        └── health.py        # Health check endpoint
"""
