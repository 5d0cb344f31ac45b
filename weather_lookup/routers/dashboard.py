"""
Dashboard router.

Server-rendered page that lists every stored observation as a card and
searches the latest observation for a city. Errors never reach the page
as-is: details go to the log and the page shows a generic message.
"""

import os
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from weather_lookup.config import settings
from weather_lookup.core.validation import parse_input
from weather_lookup.database import get_db
from weather_lookup.schemas.weather import WeatherQuery
from weather_lookup.services import weather as weather_service
from weather_lookup.utils.logging_config import get_logger
from weather_lookup.utils.rate_limit import limiter

logger = get_logger(__name__)

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "templates")

SEARCH_FAILED = "City not found or weather data unavailable"
LOAD_FAILED = "Failed to load weather data"

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


def compass_point(degrees: int) -> str:
    """16-point compass name for a wind direction in degrees."""
    return COMPASS_POINTS[int(degrees / 22.5 + 0.5) % 16]


def uv_level(uv_index: float) -> str:
    if uv_index <= 2:
        return "Low"
    if uv_index <= 5:
        return "Moderate"
    if uv_index <= 7:
        return "High"
    if uv_index <= 10:
        return "Very High"
    return "Extreme"


def weather_icon(description: str) -> str:
    """Pick an icon from keywords in the description."""
    desc = description.lower()
    if "sun" in desc or "clear" in desc:
        return "☀️"
    if "cloud" in desc:
        return "☁️"
    if "rain" in desc:
        return "🌧️"
    if "storm" in desc:
        return "⛈️"
    if "snow" in desc:
        return "❄️"
    if "fog" in desc or "mist" in desc:
        return "🌫️"
    return "🌤️"


templates = Jinja2Templates(directory=TEMPLATES_DIR)
templates.env.filters["compass_point"] = compass_point
templates.env.filters["uv_level"] = uv_level
templates.env.filters["weather_icon"] = weather_icon

router = APIRouter(tags=["dashboard"])


def search_input(city: str, country: Optional[str]) -> Dict[str, Any]:
    """Form fields as a getWeather input; a blank country means any country."""
    data: Dict[str, Any] = {"city": city}
    if country and country.strip():
        data["country"] = country.strip().upper()
    return data


@router.get("/dashboard", response_class=HTMLResponse, include_in_schema=False)
@limiter.limit(settings.READ_RATE_LIMIT)
async def dashboard(
    request: Request,
    city: Optional[str] = Query(None, description="City to search"),
    country: Optional[str] = Query(None, description="Optional country code"),
    db: AsyncSession = Depends(get_db),
):
    """
    Render the weather dashboard.

    Without a city the page only lists observations. With one, the
    latest observation for it is shown above the list.
    """
    context: Dict[str, Any] = {
        "title": settings.PROJECT_NAME,
        "search": {"city": city or "", "country": country or ""},
        "result": None,
        "observations": [],
        "error": None,
    }

    if city and city.strip():
        try:
            query = parse_input(WeatherQuery, search_input(city, country))
            context["result"] = await weather_service.get_weather(db, query)
        except Exception:
            logger.exception(f"Failed to search weather for city={city!r} country={country!r}")
            context["error"] = SEARCH_FAILED

    try:
        context["observations"] = await weather_service.get_all_weather(db)
    except Exception:
        logger.exception("Failed to load weather data")
        context["error"] = context["error"] or LOAD_FAILED

    return templates.TemplateResponse(request, "dashboard.html", context)
