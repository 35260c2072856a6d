"""
Unit tests for exception handlers.

Tests error response formatting and status code mapping.
"""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError

from astrobookings.domain import (
    FieldError,
    ResourceNotFoundError,
    ResourceValidationError,
    ValidationFailure,
)
from astrobookings.exception_handlers import (
    general_exception_handler,
    http_exception_handler,
    resource_not_found_exception_handler,
    resource_validation_exception_handler,
    validation_exception_handler,
)


@pytest.fixture
def request_mock():
    request = MagicMock(spec=Request)
    request.method = "POST"
    request.url.path = "/launches"
    return request


def _body(response) -> dict:
    return json.loads(response.body)


@pytest.mark.asyncio
async def test_http_exception_handler(request_mock):
    exc = HTTPException(status_code=405, detail="Method Not Allowed")

    response = await http_exception_handler(request_mock, exc)

    assert response.status_code == 405
    body = _body(response)
    assert body["detail"] == "Method Not Allowed"
    assert body["type"].endswith("section-6.5.5")
    assert "errors" not in body


@pytest.mark.asyncio
async def test_resource_validation_handler_lists_camel_case_fields(request_mock):
    failure = ValidationFailure(
        (
            FieldError("rocket_id", "Rocket reference is invalid"),
            FieldError("min_passengers", "Minimum passengers must be an integer"),
        )
    )

    response = await resource_validation_exception_handler(
        request_mock, ResourceValidationError(failure)
    )

    assert response.status_code == 400
    body = _body(response)
    assert body["title"] == "Validation Error"
    assert body["instance"] == "/launches"
    assert body["errors"] == [
        {"field": "rocketId", "message": "Rocket reference is invalid"},
        {"field": "minPassengers", "message": "Minimum passengers must be an integer"},
    ]


@pytest.mark.asyncio
async def test_resource_not_found_handler(request_mock):
    exc = ResourceNotFoundError.for_key("Launch", "launch-9")

    response = await resource_not_found_exception_handler(request_mock, exc)

    assert response.status_code == 404
    body = _body(response)
    assert body["title"] == "Not Found"
    assert body["detail"] == "Launch not found"


@pytest.mark.asyncio
async def test_general_exception_handler(request_mock):
    response = await general_exception_handler(request_mock, RuntimeError("boom"))

    assert response.status_code == 500
    assert "boom" not in response.body.decode()


@pytest.mark.asyncio
async def test_validation_exception_handler_returns_400(request_mock):
    exc = RequestValidationError(
        [{"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error"}]
    )

    response = await validation_exception_handler(request_mock, exc)

    assert response.status_code == 400
    body = _body(response)
    assert body["title"] == "Malformed Request"
    assert body["errors"] == [{"field": "body.1", "message": "JSON decode error"}]


@pytest.mark.asyncio
async def test_validation_exception_handler_without_errors(request_mock):
    response = await validation_exception_handler(
        request_mock, RequestValidationError([])
    )

    assert response.status_code == 400
    assert "errors" not in _body(response)
