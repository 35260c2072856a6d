"""
Application setup utilities.

Provides the setup functions used by main.py (and by the test client
fixtures) after the application has been created.
"""

from fastapi import FastAPI

from astrobookings import __version__
from astrobookings.config import get_settings
from astrobookings.core.logging import logger
from astrobookings.infrastructure.factory import RepositoryFactory
from astrobookings.models.shared import MessageResponse
from astrobookings.services import CustomerDirectory, LaunchSchedule, RocketCatalog


def setup_app(app: FastAPI) -> None:
    """
    Build repositories and services and attach them to the application.

    Each call starts from empty collections.

    Args:
        app: FastAPI application instance to configure
    """
    settings = get_settings()
    factory = RepositoryFactory.from_settings(settings)

    rocket_catalog = RocketCatalog(
        factory.get_rocket_repository(),
        id_generator=factory.get_id_generator("rocket"),
    )
    launch_schedule = LaunchSchedule(
        factory.get_launch_repository(),
        rocket_catalog,
        id_generator=factory.get_id_generator("launch"),
    )
    customer_directory = CustomerDirectory(factory.get_customer_repository())

    app.state.rocket_catalog = rocket_catalog
    app.state.launch_schedule = launch_schedule
    app.state.customer_directory = customer_directory

    logger.info("Services wired: rockets, launches, customers")


def add_root_endpoint(app: FastAPI) -> None:
    """
    Add root endpoint to the application.

    Args:
        app: FastAPI application instance
    """
    settings = get_settings()

    @app.get("/", response_model=MessageResponse, include_in_schema=False)
    async def root() -> MessageResponse:
        """Root endpoint with API information."""
        return MessageResponse(
            message="Hello, World! Try GET /health",
            version=__version__,
            docs="/docs" if settings.enable_docs else None,
        )
