# mfnav_api/infrastructure/http/errors.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Exception → HTTP response mapping.

Every JSON error body has the flat shape ``{"error": "<message>"}``. The one
exception is :class:`Unauthorized`, answered with a plain-text
``Unauthorized`` body.
"""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.responses import Response

from mfnav_api.domain.exceptions.base import DomainError
from mfnav_api.domain.exceptions.fund_nav import Unauthorized
from mfnav_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)


def error_envelope(message: str) -> dict[str, Any]:
    """Return the canonical error body for ``message``."""
    return {"error": message}


def error_response(http_status: int, message: str) -> JSONResponse:
    """Return a JSONResponse carrying the canonical error body."""
    return JSONResponse(status_code=http_status, content=error_envelope(message))


async def handle_domain_error(request: Request, exc: DomainError) -> Response:
    if isinstance(exc, Unauthorized):
        return PlainTextResponse(exc.message or "Unauthorized", status_code=exc.http_status)

    logger.info(
        "request_rejected",
        extra={
            "extra": {
                "path": request.url.path,
                "code": exc.code,
                "http_status": exc.http_status,
                "error": exc.message,
            }
        },
    )
    return error_response(exc.http_status, exc.message)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> Response:
    return error_response(400, "invalid request")


async def handle_http_exception(request: Request, exc: HTTPException) -> Response:
    message = exc.detail if isinstance(exc.detail, str) else "HTTP error"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(message),
        headers=getattr(exc, "headers", None),
    )


async def handle_unhandled_exception(request: Request, exc: Exception) -> Response:
    logger.error(
        "unhandled_exception",
        exc_info=(type(exc), exc, exc.__traceback__),
        extra={"extra": {"path": request.url.path}},
    )
    return error_response(500, "Internal Server Error")
