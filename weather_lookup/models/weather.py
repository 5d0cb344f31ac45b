"""
Weather observation database model.

One row per reading for a city at a point in time. Rows are only ever
inserted; a newer reading for the same city supersedes older ones at
query time, ordered by ``updated_at``.
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Column, DateTime, Index, Integer, String, Text

from weather_lookup.models.base import BaseModel
from weather_lookup.models.types import DecimalText


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WeatherObservation(BaseModel):
    """
    Weather observation for a city.

    Decimal-valued measurements use DecimalText so the stored value is
    exactly what the client sent, rounded to the column scale.
    """

    __tablename__ = "weather"

    city = Column(String(100), nullable=False, index=True)
    country = Column(
        String(2),
        nullable=False,
        comment="ISO 3166-1 alpha-2 country code"
    )

    temperature = Column(DecimalText(5, 2), nullable=False, comment="Air temperature in °C")
    humidity = Column(Integer, nullable=False, comment="Relative humidity in % (0-100)")
    pressure = Column(DecimalText(7, 2), nullable=False, comment="Atmospheric pressure in hPa")
    description = Column(Text, nullable=False)
    wind_speed = Column(DecimalText(5, 2), nullable=False, comment="Wind speed in m/s")
    wind_direction = Column(
        Integer,
        nullable=False,
        comment="Wind direction in degrees (0-360, where 0=North)"
    )
    visibility = Column(DecimalText(5, 2), nullable=False, comment="Visibility in km")
    uv_index = Column(DecimalText(3, 1), nullable=False, comment="UV index (0.0-11.0)")
    feels_like = Column(DecimalText(5, 2), nullable=False, comment="Apparent temperature in °C")

    # Set in Python for sub-second resolution; SQLite CURRENT_TIMESTAMP is per second
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (
        Index("idx_weather_city_country_updated", "city", "country", "updated_at"),
        CheckConstraint("humidity >= 0 AND humidity <= 100", name="check_humidity_range"),
        CheckConstraint("wind_direction >= 0 AND wind_direction <= 360", name="check_wind_direction_range"),
    )

    def __repr__(self):
        return (
            f"<WeatherObservation(id={self.id}, city={self.city!r}, "
            f"country={self.country!r}, updated_at={self.updated_at})>"
        )
