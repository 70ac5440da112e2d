"""
Tests for the in-process event bus.
"""

from plant_tracker.shared.core.event_bus import ALL_EVENTS, DomainEvent, EventBus, EventStore


def make_event(event_type="plant.created", aggregate_id="p1"):
    return DomainEvent(event_type=event_type, aggregate_id=aggregate_id, aggregate_type="plant")


def test_handlers_receive_matching_events():
    bus = EventBus()
    created, everything = [], []
    bus.subscribe("plant.created", created.append)
    bus.subscribe(ALL_EVENTS, everything.append)

    bus.publish(make_event("plant.created"))
    bus.publish(make_event("plant.deleted"))

    assert [e.event_type for e in created] == ["plant.created"]
    assert [e.event_type for e in everything] == ["plant.created", "plant.deleted"]


def test_failing_handler_does_not_stop_others():
    bus = EventBus()
    received = []

    def broken(event):
        raise RuntimeError("handler failed")

    bus.subscribe("plant.created", broken)
    bus.subscribe("plant.created", received.append)

    bus.publish(make_event())

    assert len(received) == 1
    stats = bus.get_stats()
    assert stats["failed"] == 1
    assert stats["processed"] == 1
    assert stats["published"] == 1


def test_unsubscribe():
    bus = EventBus()
    received = []
    bus.subscribe("plant.created", received.append)

    assert bus.unsubscribe("plant.created", received.append) is True
    assert bus.unsubscribe("plant.created", received.append) is False

    bus.publish(make_event())
    assert received == []


def test_event_store_is_bounded_and_filterable():
    store = EventStore(max_events=3)
    for index in range(5):
        store.append(make_event(aggregate_id=f"p{index}"))

    assert [e.aggregate_id for e in store.get_events()] == ["p2", "p3", "p4"]
    assert [e.aggregate_id for e in store.get_events(aggregate_id="p3")] == ["p3"]


def test_event_serialises_timestamp():
    data = make_event().to_dict()
    assert isinstance(data["timestamp"], str)
    assert data["aggregate_type"] == "plant"
