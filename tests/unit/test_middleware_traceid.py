"""
Unit tests for TraceIDMiddleware.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import Request, Response

from astrobookings.core.trace_context import trace_id_context
from astrobookings.middleware import TRACE_HEADER, TraceIDMiddleware


@pytest.fixture
def middleware():
    """Create middleware instance."""
    return TraceIDMiddleware(app=AsyncMock())


def _request(headers: dict[str, str] | None = None) -> MagicMock:
    request = MagicMock(spec=Request)
    request.method = "GET"
    request.url.path = "/rockets"
    request.headers = headers or {}
    return request


@pytest.mark.asyncio
async def test_trace_id_middleware_adds_header(middleware):
    """A generated trace id is returned in the response header."""
    call_next = AsyncMock(return_value=Response(content="ok", status_code=200))

    result = await middleware.dispatch(_request(), call_next)

    assert len(result.headers[TRACE_HEADER]) > 0


@pytest.mark.asyncio
async def test_trace_id_middleware_reuses_incoming_header(middleware):
    call_next = AsyncMock(return_value=Response(status_code=204))

    result = await middleware.dispatch(_request({TRACE_HEADER: "abc-123"}), call_next)

    assert result.headers[TRACE_HEADER] == "abc-123"


@pytest.mark.asyncio
async def test_trace_id_middleware_sets_and_resets_context(middleware):
    seen: list[str | None] = []

    async def call_next(request):  # noqa: ASYNC100
        seen.append(trace_id_context.get())
        return Response()

    await middleware.dispatch(_request({TRACE_HEADER: "trace-1"}), call_next)

    assert seen == ["trace-1"]
    assert trace_id_context.get() is None


@pytest.mark.asyncio
async def test_trace_id_middleware_propagates_errors(middleware):
    call_next = AsyncMock(side_effect=RuntimeError("boom"))

    with pytest.raises(RuntimeError):
        await middleware.dispatch(_request(), call_next)

    assert trace_id_context.get() is None
