"""
Main FastAPI application for the Weather Lookup API.

This module contains the FastAPI application instance, the RPC error
handlers, the root endpoints and the dashboard.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from weather_lookup.config import settings
from weather_lookup.core.exceptions import InvalidInputError, WeatherAPIError
from weather_lookup.database import create_tables
from weather_lookup.routers.dashboard import router as dashboard_router
from weather_lookup.routers.rpc import router as rpc_router
from weather_lookup.utils.logging_config import setup_logging, get_logger
from weather_lookup.utils.rate_limit import limiter

# Import all models so they are registered with Base.metadata
import weather_lookup.models  # noqa: F401

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI application.

    Note: Database tables are managed through Alembic migrations.
    Run `alembic upgrade head`, or set AUTO_CREATE_TABLES=true in development.
    """
    logger.info(f"{settings.PROJECT_NAME} starting up")
    logger.info(f"Environment: {'Development' if settings.DEBUG else 'Production'}")
    logger.info(f"RPC path: {settings.RPC_PATH}")
    logger.info(f"Database: {settings.SQLALCHEMY_DATABASE_URI.split('://')[0]}")

    if settings.AUTO_CREATE_TABLES:
        await create_tables()
        logger.info("Database tables created")

    yield

    logger.info(f"{settings.PROJECT_NAME} shutting down")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Create and look up city weather observations over a typed RPC API",
    version=settings.VERSION,
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


def _procedure_path(request: Request) -> Optional[str]:
    path = request.url.path
    if path.startswith(settings.RPC_PATH + "/"):
        return path[len(settings.RPC_PATH) + 1:]
    return None


def error_response(request: Request, exc: WeatherAPIError) -> JSONResponse:
    """Render a WeatherAPIError as the RPC error envelope."""
    data = {
        "code": exc.code,
        "httpStatus": exc.http_status,
        "path": _procedure_path(request),
    }
    data.update(exc.to_data())
    return JSONResponse(
        status_code=exc.http_status,
        content={
            "error": {
                "message": exc.message,
                "code": exc.rpc_code,
                "data": data,
            }
        },
    )


@app.exception_handler(WeatherAPIError)
async def weather_api_exception_handler(request: Request, exc: WeatherAPIError):
    """Handle domain errors raised by the procedures."""
    logger.info(f"{_procedure_path(request) or request.url.path} -> {exc.code}: {exc.message}")
    return error_response(request, exc)


def _validation_field(error) -> str:
    # loc is ("body", ...) or ("query", name); positions in raw JSON are not fields
    parts = [part for part in error.get("loc", ())[1:] if isinstance(part, str)]
    return ".".join(parts) or "input"


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are reported like any other invalid input."""
    issues = [
        {"field": _validation_field(error), "message": error["msg"]}
        for error in exc.errors()
    ]
    first = issues[0] if issues else {"field": "input", "message": "Invalid request"}
    return error_response(
        request,
        InvalidInputError(
            f"Invalid input for field '{first['field']}': {first['message']}",
            field=first["field"],
            issues=issues,
        ),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Storage and other unexpected failures: log details, answer generically."""
    logger.exception(f"Unhandled error on {request.url.path}")
    return error_response(request, WeatherAPIError("Internal server error"))


# Set up CORS
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.get("/")
async def root():
    """
    Root endpoint returning API information.
    """
    return {
        "message": f"Welcome to {settings.PROJECT_NAME}",
        "version": settings.VERSION,
        "rpc": settings.RPC_PATH,
        "dashboard": "/dashboard",
        "docs": "/docs",
    }


@app.get("/health")
@limiter.limit("60/minute")
async def health_check(request: Request):
    """
    Health check endpoint.

    Rate limit: 60 requests per minute
    """
    return {"status": "healthy"}


app.include_router(rpc_router)
app.include_router(dashboard_router)


def run():
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "weather_lookup.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        log_config=None,
    )


if __name__ == "__main__":
    run()
