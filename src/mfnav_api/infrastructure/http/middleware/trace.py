# src/mfnav_api/infrastructure/http/middleware/trace.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Trace ID Middleware.

Summary:
    Starlette/FastAPI middleware that guarantees every request has a stable
    per-request correlation identifier and that the same value is echoed back
    to clients. The ID is exposed as the HTTP header ``x-trace-id`` and also
    attached to ``request.state.trace_id`` for downstream access (routers,
    exception handlers, logging, the outbound NAV provider call).

Design:
    * If the inbound request already includes a usable ``x-trace-id`` we reuse
      it; otherwise a new UUIDv4 is generated.
    * An inbound ``X-Request-ID`` is stored in the logging context as well.
    * No I/O; header parsing is purely synchronous.

Layer:
    infrastructure/http/middleware
"""

from __future__ import annotations

import uuid
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from mfnav_api.infrastructure.logging.logger import set_request_context

# Public, lowercase header name (HTTP headers are case-insensitive).
TRACE_HEADER = "x-trace-id"
REQUEST_ID_HEADER = "x-request-id"

# Hard cap to avoid pathological header sizes; typical UUIDs are 36 chars.
_MAX_TRACE_LEN = 128


def _sanitize_inbound(raw: str | None) -> str | None:
    """Return a safe, non-empty identifier if provided; otherwise ``None``.

    Rules:
        * Trim surrounding whitespace.
        * Reject empty/whitespace-only after trim.
        * Reject values longer than `_MAX_TRACE_LEN`.
    """
    if raw is None:
        return None
    value = raw.strip()
    if not value or len(value) > _MAX_TRACE_LEN:
        return None
    return value


def _new_trace_id() -> str:
    """Return a new UUIDv4 string, always lowercase."""
    return str(uuid.uuid4())


class TraceIdMiddleware(BaseHTTPMiddleware):
    """Attach/echo a correlation id for every request."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Attach the trace id to the request/response cycle."""
        trace_id = _sanitize_inbound(request.headers.get(TRACE_HEADER)) or _new_trace_id()
        request_id = _sanitize_inbound(request.headers.get(REQUEST_ID_HEADER))

        request.state.trace_id = trace_id
        # Empty string clears a value left over from an earlier request on this context.
        set_request_context(trace_id=trace_id, request_id=request_id or "")

        response = await call_next(request)

        # Do not overwrite a value set downstream.
        if TRACE_HEADER not in response.headers:
            response.headers[TRACE_HEADER] = trace_id
        return response


__all__ = [
    "REQUEST_ID_HEADER",
    "TRACE_HEADER",
    "TraceIdMiddleware",
]
