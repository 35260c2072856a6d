"""Trace id context variable for request-scoped logging"""

import contextvars

trace_id_context: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "trace_id", default=None
)
