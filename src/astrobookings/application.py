"""
FastAPI application factory.

Creates and configures the FastAPI application with all middleware,
routers, and exception handlers.
"""

import time

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from astrobookings import __version__
from astrobookings.config import get_settings
from astrobookings.core.logging import logger
from astrobookings.domain.exceptions import (
    ResourceNotFoundError,
    ResourceValidationError,
)
from astrobookings.exception_handlers import (
    general_exception_handler,
    http_exception_handler,
    resource_not_found_exception_handler,
    resource_validation_exception_handler,
    validation_exception_handler,
)
from astrobookings.lifespan import lifespan
from astrobookings.middleware import TraceIDMiddleware
from astrobookings.openapi import configure_openapi
from astrobookings.routes import register_routes


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Services are attached separately by ``app_setup.setup_app``.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    # Must be set BEFORE creating FastAPI instance
    docs_url = "/docs" if settings.enable_docs else None
    redoc_url = "/redoc" if settings.enable_docs else None
    openapi_url = "/openapi.json" if settings.enable_docs else None

    app = FastAPI(
        title=settings.project_name,
        description=settings.project_description,
        version=__version__,
        lifespan=lifespan,
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url=openapi_url,
    )
    app.state.started_at = time.monotonic()

    # Register exception handlers (RFC 7807 Problem Details)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(
        ResourceValidationError, resource_validation_exception_handler
    )
    app.add_exception_handler(
        ResourceNotFoundError, resource_not_found_exception_handler
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Add middleware
    app.add_middleware(TraceIDMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=settings.get_cors_allowed_methods(),
        allow_headers=settings.get_cors_allowed_headers(),
    )

    register_routes(app)

    configure_openapi(app)

    logger.info(f"FastAPI application created (v{__version__})")
    logger.info(f"CORS origins: {settings.get_allowed_origins()}")

    return app
