"""
Application lifecycle management.

Handles startup and shutdown events for the FastAPI application.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Args:
        app: FastAPI application instance
    """
    logger.info("Starting astrobookings backend...")
    logger.info(f"Application version: {app.version}")

    yield

    # In-memory collections are discarded with the process
    rockets = getattr(app.state, "rocket_catalog", None)
    launches = getattr(app.state, "launch_schedule", None)
    customers = getattr(app.state, "customer_directory", None)
    if rockets and launches and customers:
        logger.info(
            f"Discarding {len(rockets.list_all())} rockets, "
            f"{len(launches.list_all())} launches, "
            f"{len(customers.list_all())} customers"
        )

    logger.info("Shutting down astrobookings backend...")
