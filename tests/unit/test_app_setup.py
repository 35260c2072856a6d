"""Tests for application factory and setup helpers."""

from fastapi import FastAPI

from astrobookings import __version__
from astrobookings.app_setup import add_root_endpoint, setup_app
from astrobookings.application import create_app
from astrobookings.services import CustomerDirectory, LaunchSchedule, RocketCatalog


def test_create_app_disables_docs_in_tests():
    app = create_app()

    assert isinstance(app, FastAPI)
    assert app.version == __version__
    assert app.docs_url is None
    assert app.openapi_url is None


def test_setup_app_wires_services():
    app = create_app()

    setup_app(app)

    assert isinstance(app.state.rocket_catalog, RocketCatalog)
    assert isinstance(app.state.launch_schedule, LaunchSchedule)
    assert isinstance(app.state.customer_directory, CustomerDirectory)


def test_setup_app_starts_empty_each_time():
    first, second = create_app(), create_app()
    setup_app(first)
    setup_app(second)

    first.state.rocket_catalog.create({"name": "Falcon", "range": "moon", "capacity": 3})

    assert second.state.rocket_catalog.list_all() == []


def test_setup_app_uses_configured_id_strategy():
    app = create_app()
    setup_app(app)

    rocket = app.state.rocket_catalog.create(
        {"name": "Falcon", "range": "moon", "capacity": 3}
    ).value

    assert rocket.id == "rocket-1"


def test_root_endpoint(client):
    response = client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Hello, World! Try GET /health"
    assert body["version"] == __version__
    assert body["docs"] is None


def test_add_root_endpoint_registers_route():
    app = create_app()
    add_root_endpoint(app)

    assert "/" in {route.path for route in app.routes}
