"""
Dependency injection container for the astrobookings backend.

This module provides centralized dependency injection using FastAPI's Depends
with typing.Annotated for clean type hints throughout the application.

Services hold in-memory state, so they are built once per application by
``app_setup.setup_app`` and stored on ``app.state``; the providers below
only hand out those instances.
"""

from typing import Annotated

from fastapi import Depends, Request

from astrobookings.config import Settings, get_settings
from astrobookings.services import CustomerDirectory, LaunchSchedule, RocketCatalog

# ============================================================================
# Settings Dependencies
# ============================================================================

SettingsDep = Annotated[Settings, Depends(get_settings)]
"""Injected Settings instance (cached via lru_cache)."""


# ============================================================================
# Service Dependencies
# ============================================================================


def get_rocket_catalog(request: Request) -> RocketCatalog:
    """
    Get the application's rocket catalog.

    Args:
        request: Current request (injected)

    Returns:
        RocketCatalog bound to the application
    """
    return request.app.state.rocket_catalog


RocketCatalogDep = Annotated[RocketCatalog, Depends(get_rocket_catalog)]
"""Injected RocketCatalog service."""


def get_launch_schedule(request: Request) -> LaunchSchedule:
    """
    Get the application's launch schedule.

    Args:
        request: Current request (injected)

    Returns:
        LaunchSchedule bound to the application
    """
    return request.app.state.launch_schedule


LaunchScheduleDep = Annotated[LaunchSchedule, Depends(get_launch_schedule)]
"""Injected LaunchSchedule service."""


def get_customer_directory(request: Request) -> CustomerDirectory:
    """
    Get the application's customer directory.

    Args:
        request: Current request (injected)

    Returns:
        CustomerDirectory bound to the application
    """
    return request.app.state.customer_directory


CustomerDirectoryDep = Annotated[CustomerDirectory, Depends(get_customer_directory)]
"""Injected CustomerDirectory service."""
