"""
Tests for the server-rendered weather dashboard.
"""

import asyncio
import logging

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from weather_lookup.database import Base, get_db
from weather_lookup.main import app
from weather_lookup.routers.dashboard import (
    LOAD_FAILED,
    SEARCH_FAILED,
    compass_point,
    search_input,
    uv_level,
    weather_icon,
)


TEST_DATABASE_URL = "sqlite+aiosqlite:///./test_dashboard.db"

engine = create_async_engine(TEST_DATABASE_URL, poolclass=NullPool)
TestingSessionLocal = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


async def override_get_db():
    """Override the database dependency."""
    async with TestingSessionLocal() as session:
        yield session


async def reset_schema():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def drop_schema():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
def client():
    """Test client backed by an empty database."""
    asyncio.run(reset_schema())
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_client(client, london_weather, paris_weather):
    for payload in (london_weather, paris_weather):
        assert client.post("/trpc/createWeather", json=payload).status_code == 200
    return client


def test_dashboard_empty(client):
    response = client.get("/dashboard")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "No weather data available" in response.text
    assert 'role="alert"' not in response.text


def test_dashboard_lists_every_observation(seeded_client):
    response = seeded_client.get("/dashboard")
    assert response.status_code == 200

    html = response.text
    assert html.count('class="card observation"') == 2
    assert "London, GB" in html
    assert "Paris, FR" in html
    assert "1013.25 hPa" in html
    assert 'id="search-result"' not in html


def test_dashboard_search_hit(seeded_client):
    response = seeded_client.get("/dashboard", params={"city": "London", "country": "gb"})
    assert response.status_code == 200

    html = response.text
    assert 'id="search-result"' in html
    assert "Partly cloudy" in html
    assert 'role="alert"' not in html
    # The search result is shown above the full list
    assert html.count('class="card observation"') == 3


def test_dashboard_search_not_found_shows_generic_message(seeded_client, caplog):
    with caplog.at_level(logging.ERROR):
        response = seeded_client.get("/dashboard", params={"city": "Paris", "country": "US"})

    assert response.status_code == 200
    html = response.text
    assert SEARCH_FAILED in html
    assert "Weather data not found" not in html
    assert 'id="search-result"' not in html
    # The list still renders below the banner
    assert html.count('class="card observation"') == 2

    assert "Weather data not found for city: Paris, US" in caplog.text


def test_dashboard_search_invalid_country(seeded_client):
    response = seeded_client.get("/dashboard", params={"city": "London", "country": "GBR"})
    assert response.status_code == 200
    assert SEARCH_FAILED in response.text


def test_dashboard_blank_city_does_not_search(seeded_client):
    response = seeded_client.get("/dashboard", params={"city": "   "})
    assert response.status_code == 200
    assert 'role="alert"' not in response.text
    assert 'id="search-result"' not in response.text


def test_dashboard_store_failure_shows_generic_message(client, caplog):
    asyncio.run(drop_schema())

    with caplog.at_level(logging.ERROR):
        response = client.get("/dashboard")

    assert response.status_code == 200
    assert LOAD_FAILED in response.text
    assert "Failed to load weather data" in caplog.text


def test_search_input():
    assert search_input("London", None) == {"city": "London"}
    assert search_input("London", "  ") == {"city": "London"}
    assert search_input("London", " gb ") == {"city": "London", "country": "GB"}


@pytest.mark.parametrize(
    "degrees,expected",
    [(0, "N"), (90, "E"), (180, "S"), (200, "SSW"), (350, "N"), (360, "N")],
)
def test_compass_point(degrees, expected):
    assert compass_point(degrees) == expected


@pytest.mark.parametrize(
    "uv_index,expected",
    [(0.0, "Low"), (2.0, "Low"), (4.5, "Moderate"), (6.2, "High"), (10.0, "Very High"), (11.0, "Extreme")],
)
def test_uv_level(uv_index, expected):
    assert uv_level(uv_index) == expected


def test_weather_icon():
    assert weather_icon("Clear sky") == "☀️"
    assert weather_icon("Partly cloudy") == "☁️"
    assert weather_icon("Heavy rain") == "🌧️"
    assert weather_icon("Hazy") == "🌤️"
