# CRUD operations package

from weather_lookup.crud.base import CRUDBase
from weather_lookup.crud.weather import CRUDWeather, observation

__all__ = [
    "CRUDBase",
    "CRUDWeather", "observation",
]
