"""
Shared fixtures: a controllable clock, a store and undo buffer driven by it,
and API clients bound to a fresh application per test.
"""

import pytest
from fastapi.testclient import TestClient

from plant_tracker.main import create_application
from plant_tracker.modules.plant_management.domain.services.care_record_store import CareRecordStore
from plant_tracker.modules.plant_management.domain.services.undo_buffer import UndoBuffer
from plant_tracker.shared.core.event_bus import EventBus

from tests.factories import FakeClock, make_settings, sequential_ids


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def store(clock, event_bus):
    return CareRecordStore(clock=clock, event_bus=event_bus, id_factory=sequential_ids("plant"))


@pytest.fixture
def undo_buffer(store, clock, event_bus):
    return UndoBuffer(store, clock=clock, window_ms=30_000, event_bus=event_bus)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def app(settings, clock):
    return create_application(settings=settings, clock=clock)


@pytest.fixture
def anon_client(app):
    """Client that has not signed in."""
    return TestClient(app)


@pytest.fixture
def client(anon_client):
    """Signed-in client."""
    response = anon_client.post(
        "/api/v1/auth/login",
        json={"email": "gardener@example.com", "password": "secret"},
    )
    assert response.status_code == 200
    return anon_client
