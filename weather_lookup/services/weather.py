"""
Weather procedure handlers.

Each handler takes the database session and an already validated input,
and returns response schemas whose decimal fields are native floats.
Failures are logged and re-raised; nothing here retries.
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from weather_lookup.core.exceptions import NotFoundError
from weather_lookup.crud.weather import observation as observation_crud
from weather_lookup.schemas.weather import Weather, WeatherCreate, WeatherQuery
from weather_lookup.utils.logging_config import get_logger

logger = get_logger(__name__)


def not_found_message(city: str, country: Optional[str] = None) -> str:
    """Message for a get-by-city miss, naming the city and country queried."""
    suffix = f", {country}" if country else ""
    return f"Weather data not found for city: {city}{suffix}"


async def create_weather(db: AsyncSession, data: WeatherCreate) -> Weather:
    """
    Store a new observation.

    The record is read back after the insert so the response carries the
    assigned id, the write timestamp and the stored (rounded) decimals.
    """
    try:
        record = await observation_crud.create(db, obj_in=data)
    except Exception:
        logger.error(f"Weather creation failed for city={data.city!r} country={data.country!r}")
        raise

    logger.info(f"Stored weather observation id={record.id} for {record.city}, {record.country}")
    return Weather.model_validate(record)


async def get_all_weather(db: AsyncSession) -> List[Weather]:
    """Return every stored observation, in storage order."""
    try:
        records = await observation_crud.get_all(db)
    except Exception:
        logger.error("Failed to fetch weather data")
        raise

    return [Weather.model_validate(record) for record in records]


async def get_weather(db: AsyncSession, query: WeatherQuery) -> Weather:
    """
    Return the latest observation for a city, optionally within a country.

    Raises:
        NotFoundError: No observation matches
    """
    try:
        record = await observation_crud.get_latest_by_city(
            db, city=query.city, country=query.country
        )
    except Exception:
        logger.error(f"Get weather failed for city={query.city!r} country={query.country!r}")
        raise

    if record is None:
        raise NotFoundError(not_found_message(query.city, query.country))

    return Weather.model_validate(record)
