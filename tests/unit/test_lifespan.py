"""Tests for application lifespan and entry point."""

from unittest.mock import patch

import pytest
from fastapi import FastAPI

from astrobookings.app_setup import setup_app
from astrobookings.lifespan import lifespan


@pytest.mark.asyncio
async def test_lifespan_without_services():
    app = FastAPI(version="1.0.0")

    async with lifespan(app):
        pass


@pytest.mark.asyncio
async def test_lifespan_with_services():
    app = FastAPI(version="1.0.0")
    setup_app(app)
    app.state.rocket_catalog.create({"name": "Falcon", "range": "moon", "capacity": 3})

    async with lifespan(app):
        assert len(app.state.rocket_catalog.list_all()) == 1


def test_main_module_builds_wired_app():
    from astrobookings import main

    assert main.app.state.rocket_catalog is not None
    assert "/health" in {route.path for route in main.app.routes}


def test_run_starts_uvicorn_with_settings():
    from astrobookings import main

    with patch("uvicorn.run") as run:
        main.run()

    args, kwargs = run.call_args
    assert args == ("astrobookings.main:app",)
    assert kwargs["port"] == 3000
