"""
Routes registration for the FastAPI application.

Centralizes all router registrations for clean application setup.
"""

from fastapi import FastAPI

from astrobookings.api.v1.customers.router import router as customers_router
from astrobookings.api.v1.health.router import router as health_router
from astrobookings.api.v1.launches.router import router as launches_router
from astrobookings.api.v1.rockets.router import router as rockets_router


def register_routes(app: FastAPI) -> None:
    """
    Register all application routers.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, public)
    app.include_router(health_router)

    # Resource endpoints
    app.include_router(rockets_router)
    app.include_router(launches_router)
    app.include_router(customers_router)
