"""
Tests for settings validation.
"""

import pytest
from pydantic import ValidationError

from tests.factories import make_settings


def test_defaults():
    settings = make_settings()

    assert settings.UNDO_WINDOW_MS == 30_000
    assert settings.DEFAULT_WATERING_FREQUENCY == 7
    assert settings.is_testing
    assert settings.cors_origins_list == ["http://localhost:3000", "http://localhost:8080"]


def test_values_are_normalised():
    settings = make_settings(ENVIRONMENT="Production", LOG_LEVEL="debug", LOG_FORMAT="TEXT")

    assert settings.ENVIRONMENT == "production"
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "text"


@pytest.mark.parametrize(
    "overrides",
    [
        {"ENVIRONMENT": "moon"},
        {"LOG_LEVEL": "LOUD"},
        {"LOG_FORMAT": "xml"},
        {"UNDO_WINDOW_MS": -1},
        {"TICK_INTERVAL_SECONDS": 0},
        {"DEFAULT_WATERING_FREQUENCY": 0},
        {"CORS_ORIGINS": "localhost:3000"},
    ],
)
def test_invalid_values_are_rejected(overrides):
    with pytest.raises(ValidationError):
        make_settings(**overrides)
