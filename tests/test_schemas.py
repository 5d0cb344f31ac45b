"""
Tests for procedure input validation.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from weather_lookup.core.exceptions import InvalidInputError
from weather_lookup.core.validation import parse_input
from weather_lookup.schemas.weather import Weather, WeatherCreate, WeatherQuery


def test_valid_create_input(london_weather):
    data = parse_input(WeatherCreate, london_weather)

    assert data.city == "London"
    assert data.country == "GB"
    assert data.humidity == 65
    assert data.pressure == 1013.25


def test_city_is_trimmed(london_weather):
    london_weather["city"] = "  London  "
    data = parse_input(WeatherCreate, london_weather)
    assert data.city == "London"


def test_integers_are_accepted_for_real_fields(london_weather):
    london_weather["temperature"] = 15
    data = parse_input(WeatherCreate, london_weather)
    assert data.temperature == 15.0


def test_integral_floats_are_accepted_for_integer_fields(london_weather):
    london_weather["humidity"] = 65.0
    london_weather["wind_direction"] = 360.0
    data = parse_input(WeatherCreate, london_weather)
    assert data.humidity == 65
    assert isinstance(data.humidity, int)
    assert data.wind_direction == 360


def test_integral_float_out_of_range_is_rejected(london_weather):
    london_weather["humidity"] = 101.0
    with pytest.raises(InvalidInputError) as exc_info:
        parse_input(WeatherCreate, london_weather)
    assert exc_info.value.field == "humidity"


@pytest.mark.parametrize(
    "field,value",
    [
        ("city", ""),
        ("city", "   "),
        ("country", "GBR"),
        ("country", "G"),
        ("humidity", 101),
        ("humidity", -1),
        ("humidity", 65.5),
        ("pressure", 0),
        ("pressure", -1013.25),
        ("description", ""),
        ("wind_speed", -0.1),
        ("wind_direction", 361),
        ("wind_direction", -1),
        ("visibility", -5),
        ("uv_index", 11.5),
        ("uv_index", -0.1),
        ("temperature", "15.5"),
        ("humidity", "65"),
        ("humidity", True),
        ("feels_like", float("nan")),
    ],
)
def test_invalid_field_is_named(london_weather, field, value):
    """Each constraint violation is reported against the offending field."""
    london_weather[field] = value

    with pytest.raises(InvalidInputError) as exc_info:
        parse_input(WeatherCreate, london_weather)

    assert exc_info.value.field == field
    assert field in exc_info.value.message
    assert exc_info.value.issues[0]["field"] == field


def test_missing_field_is_named(london_weather):
    del london_weather["visibility"]

    with pytest.raises(InvalidInputError) as exc_info:
        parse_input(WeatherCreate, london_weather)

    assert exc_info.value.field == "visibility"


def test_every_issue_is_listed(london_weather):
    london_weather["humidity"] = 150
    london_weather["uv_index"] = 12

    with pytest.raises(InvalidInputError) as exc_info:
        parse_input(WeatherCreate, london_weather)

    fields = {issue["field"] for issue in exc_info.value.issues}
    assert fields == {"humidity", "uv_index"}


def test_boundary_values_are_valid(london_weather):
    london_weather.update(
        humidity=0, wind_direction=360, uv_index=11.0, wind_speed=0, visibility=0
    )
    data = parse_input(WeatherCreate, london_weather)
    assert data.wind_direction == 360
    assert data.uv_index == 11.0


def test_non_object_input_is_rejected():
    with pytest.raises(InvalidInputError) as exc_info:
        parse_input(WeatherQuery, ["London"])

    assert exc_info.value.field == "input"


def test_query_country_is_optional():
    query = parse_input(WeatherQuery, {"city": " Paris "})
    assert query.city == "Paris"
    assert query.country is None


def test_query_country_must_be_two_characters():
    with pytest.raises(InvalidInputError) as exc_info:
        parse_input(WeatherQuery, {"city": "Paris", "country": "FRA"})

    assert exc_info.value.field == "country"


def test_query_requires_city():
    with pytest.raises(InvalidInputError) as exc_info:
        parse_input(WeatherQuery, {})

    assert exc_info.value.field == "city"


def test_response_schema_serves_floats():
    """Stored decimals become native floats on the way out."""
    weather = Weather(
        id=1,
        city="London",
        country="GB",
        temperature=Decimal("15.50"),
        humidity=65,
        pressure=Decimal("1013.25"),
        description="Partly cloudy",
        wind_speed=Decimal("3.20"),
        wind_direction=180,
        visibility=Decimal("10.00"),
        uv_index=Decimal("4.5"),
        feels_like=Decimal("14.20"),
        updated_at=datetime(2026, 10, 19, 12, 0, 0),
    )

    assert weather.pressure == 1013.25
    assert isinstance(weather.pressure, float)
    assert isinstance(weather.uv_index, float)
    assert weather.updated_at.tzinfo is not None
