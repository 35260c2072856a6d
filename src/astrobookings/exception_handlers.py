"""Global exception handlers for standardized error responses.

Implements RFC 7807 Problem Details for HTTP APIs.
Provides consistent error formatting across all endpoints.
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel
from starlette.exceptions import HTTPException as StarletteHTTPException

from astrobookings.core.logging import logger
from astrobookings.domain.exceptions import (
    ResourceNotFoundError,
    ResourceValidationError,
)
from astrobookings.models.errors import FieldErrorDetail, ProblemDetail


def _problem_response(problem_detail: ProblemDetail) -> JSONResponse:
    return JSONResponse(
        status_code=problem_detail.status,
        content=problem_detail.model_dump(exclude_none=True),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:  # noqa: ASYNC100
    """Handle HTTPException (including unknown routes) with a ProblemDetail.

    Note: FastAPI requires exception handlers to be async even if they don't
    perform async operations. This is part of FastAPI's architecture.

    Args:
        request: The FastAPI request object.
        exc: The HTTPException that was raised.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    logger.error(f"HTTPException: {exc.status_code} - {exc.detail}")

    return _problem_response(
        ProblemDetail(
            title="An error occurred",
            status=exc.status_code,
            detail=str(exc.detail),
            instance=str(request.url.path),
        )
    )


async def resource_validation_exception_handler(
    request: Request, exc: ResourceValidationError
) -> JSONResponse:  # noqa: ASYNC100
    """Handle rejected create/update requests with a 400 ProblemDetail.

    Every field error is reported, in the order the service produced them,
    with field names in their wire (camelCase) form.

    Args:
        request: The FastAPI request object.
        exc: The ResourceValidationError carrying the ValidationFailure.

    Returns:
        JSONResponse with ProblemDetail body including field errors.
    """
    errors = [
        FieldErrorDetail(field=to_camel(error.field), message=error.message)
        for error in exc.failure.errors
    ]

    logger.warning(
        f"Validation failed on {request.method} {request.url.path}: "
        f"{[error.field for error in errors]}"
    )

    return _problem_response(
        ProblemDetail(
            title="Validation Error",
            status=400,
            detail=f"One or more validation errors occurred ({len(errors)} errors).",
            instance=str(request.url.path),
            errors=errors,
        )
    )


async def resource_not_found_exception_handler(
    request: Request, exc: ResourceNotFoundError
) -> JSONResponse:  # noqa: ASYNC100
    """Handle lookups of missing resources with a 404 ProblemDetail.

    Args:
        request: The FastAPI request object.
        exc: The ResourceNotFoundError naming the resource kind.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    logger.warning(
        f"{exc.not_found.resource} not found: key={exc.not_found.key} "
        f"({request.method} {request.url.path})"
    )

    return _problem_response(
        ProblemDetail(
            title="Not Found",
            status=404,
            detail=exc.not_found.message,
            instance=str(request.url.path),
        )
    )


async def general_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:  # noqa: ASYNC100
    """Handle unexpected exceptions with 500 Internal Server Error.

    Args:
        request: The FastAPI request object.
        exc: The exception that was raised.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    logger.exception(
        f"Unexpected error: {type(exc).__name__} on "
        f"{request.method} {request.url.path}"
    )

    return _problem_response(
        ProblemDetail(
            title="Internal Server Error",
            status=500,
            detail="An unexpected error occurred. Please try again later.",
            instance=str(request.url.path),
        )
    )


async def validation_exception_handler(  # noqa: ASYNC100
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed request bodies with a 400 ProblemDetail.

    Covers invalid JSON, a body that is not a JSON object and a missing body.

    Args:
        request: The FastAPI request object.
        exc: The RequestValidationError from request parsing.

    Returns:
        JSONResponse with ProblemDetail body including the parse errors.
    """
    logger.warning(f"Malformed request: {len(exc.errors())} errors")

    errors = [
        FieldErrorDetail(
            field=".".join(str(loc) for loc in error["loc"]),
            message=error["msg"],
        )
        for error in exc.errors()
    ]

    return _problem_response(
        ProblemDetail(
            title="Malformed Request",
            status=400,
            detail="The request body could not be parsed.",
            instance=str(request.url.path),
            errors=errors or None,
        )
    )
