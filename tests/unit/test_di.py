"""Tests for dependency providers."""

from unittest.mock import MagicMock

from fastapi import Request

from astrobookings.di import (
    get_customer_directory,
    get_launch_schedule,
    get_rocket_catalog,
)


def test_providers_read_application_state(
    rocket_catalog, launch_schedule, customer_directory
):
    request = MagicMock(spec=Request)
    request.app.state.rocket_catalog = rocket_catalog
    request.app.state.launch_schedule = launch_schedule
    request.app.state.customer_directory = customer_directory

    assert get_rocket_catalog(request) is rocket_catalog
    assert get_launch_schedule(request) is launch_schedule
    assert get_customer_directory(request) is customer_directory


def test_settings_dependency_resolves_cached_settings():
    from typing import get_args

    from astrobookings.config import Settings, get_settings
    from astrobookings.di import SettingsDep

    annotated_type, dependency = get_args(SettingsDep)

    assert annotated_type is Settings
    assert dependency.dependency is get_settings
