"""
Shared test configuration.

Settings are read at import time, so the environment is prepared here
before any weather_lookup module is imported.
"""

import os

os.environ.setdefault("SQLALCHEMY_DATABASE_URI", "sqlite+aiosqlite:///./test_weather_app.db")
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["LOG_TO_FILE"] = "false"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest  # noqa: E402


@pytest.fixture
def london_weather():
    """A valid createWeather input."""
    return {
        "city": "London",
        "country": "GB",
        "temperature": 15.5,
        "humidity": 65,
        "pressure": 1013.25,
        "description": "Partly cloudy",
        "wind_speed": 3.2,
        "wind_direction": 180,
        "visibility": 10.0,
        "uv_index": 4.5,
        "feels_like": 14.2,
    }


@pytest.fixture
def paris_weather():
    """Another valid createWeather input."""
    return {
        "city": "Paris",
        "country": "FR",
        "temperature": 18.2,
        "humidity": 72,
        "pressure": 1015.8,
        "description": "Clear sky",
        "wind_speed": 2.1,
        "wind_direction": 90,
        "visibility": 15.0,
        "uv_index": 6.2,
        "feels_like": 17.5,
    }
