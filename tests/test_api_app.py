"""
API tests for authentication, schedule, care history, health and the elapsed stream.
"""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from plant_tracker.main import create_application

from tests.factories import D0, FakeClock, make_settings

API = "/api/v1"


def add_plant(client, **overrides):
    data = {
        "name": "Boston Fern",
        "species": "Nephrolepis exaltata",
        "image_url": "https://example.com/fern.jpg",
        "watering_frequency": 3,
        "last_watered": D0.isoformat(),
    }
    data.update(overrides)
    response = client.post(f"{API}/plants", json=data)
    assert response.status_code == 201
    return response.json()


class TestAuthentication:
    def test_plant_routes_require_sign_in(self, anon_client):
        response = anon_client.get(f"{API}/plants")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"

    @pytest.mark.parametrize("path", ["/care-events", "/schedule", "/plants/form-defaults"])
    def test_other_routes_require_sign_in(self, anon_client, path):
        assert anon_client.get(f"{API}{path}").status_code == 401

    def test_login_and_logout(self, anon_client):
        assert anon_client.get(f"{API}/auth/status").json() == {"authenticated": False}

        response = anon_client.post(f"{API}/auth/login", json={"email": "a@b.c", "password": "pw"})
        assert response.json() == {"authenticated": True}
        assert anon_client.get(f"{API}/plants").status_code == 200

        anon_client.post(f"{API}/auth/logout")
        assert anon_client.get(f"{API}/auth/status").json() == {"authenticated": False}
        assert anon_client.get(f"{API}/plants").status_code == 401

    def test_login_needs_non_blank_credentials(self, anon_client):
        response = anon_client.post(f"{API}/auth/login", json={"email": " ", "password": "pw"})

        assert response.status_code == 422
        assert anon_client.get(f"{API}/auth/status").json() == {"authenticated": False}

    def test_register_signs_in(self, anon_client):
        response = anon_client.post(
            f"{API}/auth/register",
            json={"name": "Ana", "email": "ana@example.com", "password": "pw"},
        )

        assert response.status_code == 200
        assert response.json() == {"authenticated": True}
        assert anon_client.get(f"{API}/plants").status_code == 200

    @pytest.mark.parametrize("name", ["   ", ""])
    def test_register_needs_a_name(self, anon_client, name):
        response = anon_client.post(
            f"{API}/auth/register",
            json={"name": name, "email": "ana@example.com", "password": "pw"},
        )

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
        assert anon_client.get(f"{API}/auth/status").json() == {"authenticated": False}

    def test_flag_can_be_disabled(self):
        app = create_application(settings=make_settings(AUTH_REQUIRED=False), clock=FakeClock())
        assert TestClient(app).get(f"{API}/plants").status_code == 200

    def test_applications_do_not_share_state(self, client):
        add_plant(client)
        other = create_application(settings=make_settings(AUTH_REQUIRED=False), clock=FakeClock())

        assert TestClient(other).get(f"{API}/plants").json()["total"] == 0


class TestSchedule:
    def test_entries_per_plant(self, client, clock):
        fern = add_plant(client, status="healthy")
        monstera = add_plant(
            client,
            name="Monstera",
            watering_frequency=7,
            last_watered=(D0 - timedelta(days=3)).isoformat(),
        )
        clock.advance(days=3)

        body = client.get(f"{API}/schedule").json()

        assert body["as_of"].startswith("2024-05-04T08:00:00")
        fern_entry, monstera_entry = body["entries"]
        assert fern_entry["plant_id"] == fern["id"]
        assert fern_entry["days_until"] == 0
        assert fern_entry["label"] == "due today"
        assert fern_entry["watering_due"] is True
        assert fern_entry["status"] == "healthy"
        assert fern_entry["status_label"] == "Healthy"
        assert fern_entry["status_disagrees"] is True
        assert monstera_entry["plant_id"] == monstera["id"]
        assert monstera_entry["days_until"] == 1
        assert monstera_entry["label"] == "due tomorrow"
        assert monstera_entry["needs_attention"] is True
        assert monstera_entry["watering_due"] is False

    def test_overdue_is_negative(self, client, clock):
        add_plant(client)
        clock.advance(days=4)

        entry = client.get(f"{API}/schedule").json()["entries"][0]

        assert entry["days_until"] == -1
        assert entry["label"] == "due today"

    def test_sorted_by_due_date(self, client):
        add_plant(client, name="Cactus", watering_frequency=30)
        add_plant(client, name="Fern", watering_frequency=3)

        names = [e["name"] for e in client.get(f"{API}/schedule", params={"sort": "due"}).json()["entries"]]

        assert names == ["Fern", "Cactus"]

    def test_watering_moves_the_schedule(self, client, clock):
        fern = add_plant(client)
        clock.advance(days=2)
        client.post(f"{API}/plants/{fern['id']}/water")

        entry = client.get(f"{API}/schedule").json()["entries"][0]

        assert entry["next_watering"].startswith("2024-05-06T08:00:00")
        assert entry["label"] == "due in 3 days"


class TestCareHistory:
    def test_history_across_plants_includes_deleted(self, client, clock):
        fern = add_plant(client)
        monstera = add_plant(client, name="Monstera")
        client.post(f"{API}/plants/{fern['id']}/water")
        clock.advance(hours=1)
        client.post(f"{API}/plants/{monstera['id']}/care-events", json={"type": "repot"})
        client.delete(f"{API}/plants/{fern['id']}")

        body = client.get(f"{API}/care-events").json()

        assert body["total"] == 2
        assert [(e["plant_name"], e["type"]) for e in body["events"]] == [
            ("Monstera", "repot"),
            (None, "water"),
        ]

    def test_history_limit_and_filter(self, client, clock):
        fern = add_plant(client)
        for care_type in ["water", "prune", "water"]:
            client.post(f"{API}/plants/{fern['id']}/care-events", json={"type": care_type})
            clock.advance(minutes=1)

        waterings = client.get(f"{API}/care-events", params={"type": "water"}).json()
        latest = client.get(f"{API}/care-events", params={"limit": 1}).json()

        assert waterings["total"] == 2
        assert latest["total"] == 1
        assert latest["events"][0]["type"] == "water"


class TestServiceEndpoints:
    def test_health(self, anon_client):
        body = anon_client.get(f"{API}/health").json()

        assert body["status"] == "healthy"
        assert body["service"] == "plant-tracker-api"
        assert body["plants"] == 0
        assert body["undo_pending"] is False

    def test_root(self, anon_client):
        assert anon_client.get("/").json()["api_base"] == "/api/v1"

    def test_api_info_lists_module(self, anon_client):
        body = anon_client.get(f"{API}/").json()
        assert "plant_management" in body["available_modules"]

    def test_sample_data_seeded_on_startup(self):
        app = create_application(
            settings=make_settings(SEED_SAMPLE_DATA=True, AUTH_REQUIRED=False),
            clock=FakeClock(),
        )

        with TestClient(app) as client:
            names = [p["name"] for p in client.get(f"{API}/plants").json()["plants"]]
            assert app.state.expiry_ticker.running

        assert names == ["Monstera Deliciosa", "Boston Fern"]
        assert not app.state.expiry_ticker.running


class TestElapsedStream:
    def test_first_message_is_immediate(self, client, clock):
        fern = add_plant(client)
        clock.advance(hours=2, seconds=5)

        with client.websocket_connect(f"{API}/plants/{fern['id']}/elapsed/ws") as websocket:
            message = websocket.receive_json()

        assert message["plant_id"] == fern["id"]
        assert (message["days"], message["hours"], message["minutes"], message["seconds"]) == (0, 2, 0, 5)

    def test_rejected_without_sign_in(self, anon_client):
        with pytest.raises(WebSocketDisconnect) as exc_info:
            with anon_client.websocket_connect(f"{API}/plants/whatever/elapsed/ws") as websocket:
                websocket.receive_json()

        assert exc_info.value.code == 1008

    def test_rejected_for_missing_plant(self, client):
        with pytest.raises(WebSocketDisconnect) as exc_info:
            with client.websocket_connect(f"{API}/plants/nope/elapsed/ws") as websocket:
                websocket.receive_json()

        assert exc_info.value.code == 1008

    def test_closed_when_plant_is_deleted(self, client, app):
        fern = add_plant(client)

        with client.websocket_connect(f"{API}/plants/{fern['id']}/elapsed/ws") as websocket:
            websocket.receive_json()
            app.state.store.delete_plant(fern["id"])
            with pytest.raises(WebSocketDisconnect) as exc_info:
                while True:
                    websocket.receive_json()

        assert exc_info.value.code == 1000
