"""
Weather observation CRUD operations.
"""

from typing import Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from weather_lookup.crud.base import CRUDBase
from weather_lookup.models.weather import WeatherObservation
from weather_lookup.schemas.weather import WeatherCreate


class CRUDWeather(CRUDBase[WeatherObservation, WeatherCreate]):
    """
    CRUD operations for WeatherObservation model.
    """

    async def get_latest_by_city(
        self, db: AsyncSession, *, city: str, country: Optional[str] = None
    ) -> Optional[WeatherObservation]:
        """
        Get the most recent observation for a city.

        City and country are exact, case-sensitive matches. Observations
        sharing the latest timestamp are told apart by the highest id.

        Args:
            db: Database session
            city: City name
            country: Optional ISO 3166-1 alpha-2 country code

        Returns:
            Latest WeatherObservation instance or None
        """
        query = select(WeatherObservation).where(WeatherObservation.city == city)
        if country is not None:
            query = query.where(WeatherObservation.country == country)

        result = await db.execute(
            query
            .order_by(desc(WeatherObservation.updated_at), desc(WeatherObservation.id))
            .limit(1)
        )
        return result.scalars().first()


observation = CRUDWeather(WeatherObservation)
