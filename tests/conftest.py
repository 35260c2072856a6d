"""Global pytest configuration and fixtures for all tests."""

import os
from datetime import UTC, datetime

import pytest

# Settings are cached on first import, so the test environment must be in
# place before any astrobookings module is loaded.
TEST_ENV_VARS = {
    "ENABLE_DOCS": "false",  # Keep docs disabled in tests
    "ID_STRATEGY": "sequential",
    "REPOSITORY_PROVIDER": "memory",
    "LOG_LEVEL": "DEBUG",
    "LOG_VERBOSE": "true",
}
os.environ.update(TEST_ENV_VARS)

from fastapi.testclient import TestClient  # noqa: E402

from astrobookings.app_setup import add_root_endpoint, setup_app  # noqa: E402
from astrobookings.application import create_app  # noqa: E402
from astrobookings.infrastructure.implementations.memory import (  # noqa: E402
    InMemoryCustomerRepository,
    InMemoryLaunchRepository,
    InMemoryRocketRepository,
)
from astrobookings.services import (  # noqa: E402
    CustomerDirectory,
    LaunchSchedule,
    RocketCatalog,
)
from astrobookings.utils.ids import SequentialIdGenerator  # noqa: E402

FIXED_NOW = datetime(2030, 1, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def fixed_clock():
    """Clock frozen at FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def rocket_catalog():
    """Empty rocket catalog with deterministic ids."""
    return RocketCatalog(
        InMemoryRocketRepository(), id_generator=SequentialIdGenerator("rocket")
    )


@pytest.fixture
def launch_schedule(rocket_catalog, fixed_clock):
    """Empty launch schedule bound to ``rocket_catalog``."""
    return LaunchSchedule(
        InMemoryLaunchRepository(),
        rocket_catalog,
        id_generator=SequentialIdGenerator("launch"),
        clock=fixed_clock,
    )


@pytest.fixture
def customer_directory():
    """Empty customer directory."""
    return CustomerDirectory(InMemoryCustomerRepository())


@pytest.fixture
def rocket(rocket_catalog):
    """A stored rocket with capacity 8."""
    return rocket_catalog.create(
        {"name": "Falcon", "range": "orbital", "capacity": 8}
    ).value


@pytest.fixture
def app():
    """Fully wired application with empty collections."""
    application = create_app()
    setup_app(application)
    add_root_endpoint(application)
    return application


@pytest.fixture
def client(app):
    """Test client over a fresh application."""
    with TestClient(app) as test_client:
        yield test_client
