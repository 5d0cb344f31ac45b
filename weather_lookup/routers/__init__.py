# API routers package

from weather_lookup.routers.dashboard import router as dashboard_router
from weather_lookup.routers.rpc import router as rpc_router

__all__ = ["dashboard_router", "rpc_router"]
