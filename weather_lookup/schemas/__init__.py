# Pydantic schemas package

from weather_lookup.schemas.base import BaseSchema, IDSchema, InputSchema
from weather_lookup.schemas.rpc import (
    RPCResult, RPCResponse, RPCIssue, RPCErrorData, RPCErrorBody, RPCErrorResponse
)
from weather_lookup.schemas.weather import (
    DECIMAL_FIELDS, HealthCheck, Weather, WeatherCreate, WeatherQuery
)

__all__ = [
    # Base schemas
    "BaseSchema", "IDSchema", "InputSchema",

    # RPC envelope
    "RPCResult", "RPCResponse", "RPCIssue", "RPCErrorData", "RPCErrorBody", "RPCErrorResponse",

    # Weather schemas
    "DECIMAL_FIELDS", "HealthCheck", "Weather", "WeatherCreate", "WeatherQuery",
]
