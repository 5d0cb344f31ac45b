# Database models package

from weather_lookup.models.base import BaseModel
from weather_lookup.models.weather import WeatherObservation

__all__ = [
    "BaseModel",
    "WeatherObservation",
]
