"""
Tests for structured logging and the request logging middleware.
"""

import io
import json
import logging

import pytest
from fastapi.testclient import TestClient

from plant_tracker.main import create_application
from plant_tracker.shared.utils.logging import (
    ContextualFormatter,
    JSONFormatter,
    StructuredLogger,
    log_context,
)

from tests.factories import FakeClock, make_settings


@pytest.fixture
def capture():
    def attach(formatter):
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(formatter)
        base = logging.getLogger("tests.capture")
        base.handlers = [handler]
        base.setLevel(logging.INFO)
        base.propagate = False
        return StructuredLogger("tests.capture"), stream

    yield attach
    logging.getLogger("tests.capture").handlers = []


def test_json_business_event(capture):
    logger, stream = capture(JSONFormatter("%(message)s"))

    with log_context(request_id="req-1"):
        logger.log_business_event("plant.created", "Plant added", entity_id="p1", entity_type="plant")

    record = json.loads(stream.getvalue())
    assert record["message"] == "Plant added"
    assert record["level"] == "INFO"
    assert record["request_id"] == "req-1"
    assert record["service"] == "plant-tracker-api"
    assert record["extra"]["business_event_type"] == "plant.created"
    assert record["extra"]["entity_id"] == "p1"


def test_text_format_keeps_logger_name(capture):
    logger, stream = capture(ContextualFormatter("%(name)s %(levelname)s %(message)s %(plant_id)s"))

    logger.info("Plant added", name="Fern", plant_id="p1")

    assert stream.getvalue().strip() == "tests.capture INFO Plant added p1"


def test_request_id_header_is_echoed():
    app = create_application(
        settings=make_settings(ENVIRONMENT="development", AUTH_REQUIRED=False),
        clock=FakeClock(),
    )
    client = TestClient(app)

    given = client.get("/api/v1/plants", headers={"X-Request-ID": "abc-123"})
    generated = client.get("/api/v1/plants")

    assert given.headers["X-Request-ID"] == "abc-123"
    assert generated.headers["X-Request-ID"]
