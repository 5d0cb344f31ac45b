"""
RPC router.

This module exposes the weather procedures under a single path prefix.
Queries are GET requests whose input travels JSON-encoded in the
``input`` query parameter; mutations are POST requests with a JSON body.
Successful calls answer ``{"result": {"data": ...}}``.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query, Request
from pydantic import Json
from sqlalchemy.ext.asyncio import AsyncSession

from weather_lookup.config import settings
from weather_lookup.core.validation import parse_input
from weather_lookup.database import get_db
from weather_lookup.schemas.rpc import RPCErrorResponse, RPCResponse, result_envelope
from weather_lookup.schemas.weather import HealthCheck, Weather, WeatherCreate, WeatherQuery
from weather_lookup.services import weather as weather_service
from weather_lookup.utils.rate_limit import limiter

router = APIRouter(
    prefix=settings.RPC_PATH,
    tags=["weather"],
    responses={
        400: {"model": RPCErrorResponse, "description": "Invalid input"},
        404: {"model": RPCErrorResponse, "description": "Not found"},
    },
)


@router.get("/healthcheck", response_model=RPCResponse[HealthCheck])
@limiter.limit("60/minute")
async def healthcheck(request: Request):
    """
    Liveness check.

    Rate limit: 60 requests per minute
    """
    return result_envelope(
        HealthCheck(status="ok", timestamp=datetime.now(timezone.utc))
    )


@router.get("/getWeather", response_model=RPCResponse[Weather])
@limiter.limit(settings.READ_RATE_LIMIT)
async def get_weather(
    request: Request,
    input_: Optional[Json[Any]] = Query(
        None,
        alias="input",
        description='JSON-encoded input, e.g. {"city": "London", "country": "GB"}'
    ),
    db: AsyncSession = Depends(get_db),
):
    """
    Get the most recent observation for a city.

    Matches the city (and the country, when given) exactly. Answers
    NOT_FOUND when nothing matches.
    """
    query = parse_input(WeatherQuery, {} if input_ is None else input_)
    return result_envelope(await weather_service.get_weather(db, query))


@router.get("/getAllWeather", response_model=RPCResponse[List[Weather]])
@limiter.limit(settings.READ_RATE_LIMIT)
async def get_all_weather(
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    """
    Get every stored observation.

    Order is storage order; callers must not rely on it being by recency.
    """
    return result_envelope(await weather_service.get_all_weather(db))


@router.post("/createWeather", response_model=RPCResponse[Weather])
@limiter.limit(settings.WRITE_RATE_LIMIT)
async def create_weather(
    request: Request,
    payload: Any = Body(None, examples=[WeatherCreate.model_config["json_schema_extra"]["example"]]),
    db: AsyncSession = Depends(get_db),
):
    """
    Store a new observation.

    The input is validated before the database is touched; invalid
    fields answer BAD_REQUEST naming the field.
    """
    data = parse_input(WeatherCreate, payload)
    return result_envelope(await weather_service.create_weather(db, data))
