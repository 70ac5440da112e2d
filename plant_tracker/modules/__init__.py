"""
Feature modules of the plant tracker.
"""
