# 📄 File: plant_tracker/modules/plant_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Helpers that feed the plant tracker from outside, like the example plants.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer for plant management; currently the sample-data loader.
# 🔗 Dependencies:
# sample_data.py
# 🔄 Connected Modules / Calls From:
# plant_tracker.main

from .sample_data import build_sample_records, seed_sample_data

__all__ = ["build_sample_records", "seed_sample_data"]
