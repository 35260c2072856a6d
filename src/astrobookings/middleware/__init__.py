"""
Request tracing middleware.

Every request gets a trace_id so that log lines produced while serving it
can be correlated. Clients may supply their own through ``X-Trace-ID``.
"""

import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from astrobookings.core.logging import logger
from astrobookings.core.trace_context import trace_id_context

TRACE_HEADER = "X-Trace-ID"


class TraceIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that binds a trace_id to each request.

    The trace_id lives in a context variable that the logger reads, and is
    echoed back in the ``X-Trace-ID`` response header.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Processes the request inside its trace context.

        Args:
            request: HTTP request
            call_next: Next middleware/handler

        Returns:
            Response with X-Trace-ID header
        """
        trace_id = request.headers.get(TRACE_HEADER) or str(uuid.uuid4())
        token = trace_id_context.set(trace_id)
        started = time.perf_counter()

        logger.debug(f"Request started: {request.method} {request.url.path}")

        try:
            response = await call_next(request)
            response.headers[TRACE_HEADER] = trace_id

            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> "
                f"{response.status_code} ({elapsed_ms:.1f} ms)"
            )
            return response

        except Exception:
            logger.exception(f"Request failed: {request.method} {request.url.path}")
            raise

        finally:
            trace_id_context.reset(token)


__all__ = ["TRACE_HEADER", "TraceIDMiddleware"]
