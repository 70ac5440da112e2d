"""
Core utilities package for the plant tracker.
Provides the exception hierarchy, the authentication flag and the event bus.
"""

from .exceptions import (
    PlantCareException,
    AuthenticationError,
    ValidationError,
    NotFoundError,
    PlantNotFoundError,
    NothingToRestoreError,
)

from .event_bus import DomainEvent, EventBus, EventStore, ALL_EVENTS
from .security import AuthState

__all__ = [
    "PlantCareException",
    "AuthenticationError",
    "ValidationError",
    "NotFoundError",
    "PlantNotFoundError",
    "NothingToRestoreError",
    "DomainEvent",
    "EventBus",
    "EventStore",
    "ALL_EVENTS",
    "AuthState",
]
