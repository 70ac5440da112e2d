"""
Event bus system for the plant tracker.
Lets other parts of the application react to plant and care-event changes
without the store knowing about them.

Everything runs synchronously in the caller: publish() returns after every
handler has been called. A failing handler is logged and does not affect
the publisher or the other handlers.
"""

import logging
from dataclasses import dataclass, asdict, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional
from uuid import uuid4

logger = logging.getLogger(__name__)

# Subscribing to this event type receives every event
ALL_EVENTS = "*"


@dataclass
class DomainEvent:
    """
    Base class for all domain events.
    Events represent something that happened in the domain.
    """
    event_type: str
    aggregate_id: str
    aggregate_type: str
    payload: Dict[str, Any] = field(default_factory=dict)
    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        data = asdict(self)
        data['timestamp'] = self.timestamp.isoformat()
        return data


EventHandler = Callable[[DomainEvent], None]


class EventStore:
    """
    Bounded in-memory record of published events.
    Oldest events are dropped once ``max_events`` is reached.
    """

    def __init__(self, max_events: int = 1000):
        self.max_events = max_events
        self.events: List[DomainEvent] = []

    def append(self, event: DomainEvent):
        self.events.append(event)
        if len(self.events) > self.max_events:
            del self.events[0:len(self.events) - self.max_events]

    def get_events(
        self,
        aggregate_id: Optional[str] = None,
        event_type: Optional[str] = None,
    ) -> List[DomainEvent]:
        """Retrieve events with optional filtering, oldest first."""
        filtered_events = self.events

        if aggregate_id:
            filtered_events = [e for e in filtered_events if e.aggregate_id == aggregate_id]

        if event_type:
            filtered_events = [e for e in filtered_events if e.event_type == event_type]

        return list(filtered_events)


class EventBus:
    """
    Event bus for publishing and subscribing to domain events.
    """

    def __init__(self, event_store: Optional[EventStore] = None):
        self.subscriptions: Dict[str, List[EventHandler]] = {}
        self.event_store = event_store or EventStore()
        self._stats = {
            "published": 0,
            "processed": 0,
            "failed": 0,
        }

    def subscribe(self, event_type: str, handler: EventHandler):
        """
        Register ``handler`` for ``event_type``.

        Use ``ALL_EVENTS`` to receive every event.
        """
        self.subscriptions.setdefault(event_type, []).append(handler)
        logger.debug(f"Handler {getattr(handler, '__name__', handler)} subscribed to {event_type}")

    def unsubscribe(self, event_type: str, handler: EventHandler) -> bool:
        handlers = self.subscriptions.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def publish(self, event: DomainEvent):
        """Store the event and call every matching handler in subscription order."""
        self._stats["published"] += 1
        self.event_store.append(event)

        handlers = self.subscriptions.get(event.event_type, []) + self.subscriptions.get(ALL_EVENTS, [])
        if not handlers:
            logger.debug(f"No handlers for event type: {event.event_type}")
            return

        for handler in handlers:
            try:
                handler(event)
                self._stats["processed"] += 1
            except Exception as e:
                self._stats["failed"] += 1
                logger.error(
                    f"Error handling event {event.event_id} ({event.event_type}): {e}",
                    exc_info=True
                )

    def get_stats(self) -> Dict[str, Any]:
        return {
            **self._stats,
            "subscriptions": {k: len(v) for k, v in self.subscriptions.items()},
            "stored_events": len(self.event_store.events),
        }
