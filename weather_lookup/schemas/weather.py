"""
Weather data schemas.

This module contains Pydantic schemas for weather procedure inputs and
responses.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from weather_lookup.schemas.base import BaseSchema, IDSchema, InputSchema
from weather_lookup.utils.numeric import to_float

# Fields persisted as decimal text and served as floats
DECIMAL_FIELDS = (
    "temperature",
    "pressure",
    "wind_speed",
    "visibility",
    "uv_index",
    "feels_like",
)


class WeatherQuery(InputSchema):
    """Input of the get-by-city procedure."""

    city: str = Field(..., min_length=1, description="City name, exact match")
    country: Optional[str] = Field(
        None,
        min_length=2,
        max_length=2,
        description="ISO 3166-1 alpha-2 country code"
    )

    @field_validator("city", mode="before")
    @classmethod
    def strip_city(cls, v):
        """City names are matched and stored without surrounding whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class WeatherCreate(InputSchema):
    """
    Input of the create procedure.

    Bounds follow the physical meaning of each measurement.
    """

    city: str = Field(..., min_length=1, max_length=100)
    country: str = Field(
        ...,
        min_length=2,
        max_length=2,
        description="ISO 3166-1 alpha-2 country code"
    )
    temperature: float = Field(..., allow_inf_nan=False, description="Temperature in Celsius")
    humidity: int = Field(..., ge=0, le=100, description="Relative humidity percentage (0-100%)")
    pressure: float = Field(..., gt=0, allow_inf_nan=False, description="Atmospheric pressure in hPa")
    description: str = Field(..., min_length=1)
    wind_speed: float = Field(..., ge=0, allow_inf_nan=False, description="Wind speed in m/s")
    wind_direction: int = Field(..., ge=0, le=360, description="Wind direction in degrees (0-360°, 0=North)")
    visibility: float = Field(..., ge=0, allow_inf_nan=False, description="Visibility in km")
    uv_index: float = Field(..., ge=0, le=11, allow_inf_nan=False, description="UV index (0.0-11.0)")
    feels_like: float = Field(..., allow_inf_nan=False, description="Apparent temperature in Celsius")

    @field_validator("city", mode="before")
    @classmethod
    def strip_city(cls, v):
        """City names are matched and stored without surrounding whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("humidity", "wind_direction", mode="before")
    @classmethod
    def integral_float_to_int(cls, v):
        """JSON does not tell 65 from 65.0; both are the integer 65."""
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
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
                "feels_like": 14.2
            }
        }
    )


class Weather(IDSchema):
    """Weather observation as served to clients."""

    city: str
    country: str
    temperature: float
    humidity: int
    pressure: float
    description: str
    wind_speed: float
    wind_direction: int
    visibility: float
    uv_index: float
    feels_like: float
    updated_at: datetime

    @field_validator(*DECIMAL_FIELDS, mode="before")
    @classmethod
    def decimal_to_float(cls, v):
        """Stored decimals leave the API as native floats."""
        return to_float(v)

    @field_validator("updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes; everything is written in UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class HealthCheck(BaseSchema):
    """Liveness response."""

    status: str = "ok"
    timestamp: datetime
