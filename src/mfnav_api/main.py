# src/mfnav_api/main.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Application Entry (Adapters Bootstrap)

Synopsis:
    FastAPI bootstrap that wires middleware, exception handlers, and routers.
    Provides an application factory (`create_app`) and a module-level eager app
    (`app`) for ASGI servers, the serverless handler, and tests.

Design:
    • Bootstrap only (no business logic): routers + middleware + handlers.
    • Lifespan owns one shared ``httpx.AsyncClient`` for upstream calls.
    • Error bodies are uniformly ``{"error": "<message>"}`` (cron 401 aside).
    • Observability:
        - Root JSON logging configured at import time.
        - Trace-id middleware installed for every request.
        - Prometheus scrape endpoint at ``/metrics``.
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from starlette.middleware.gzip import GZipMiddleware
from starlette.requests import Request
from starlette.responses import Response as StarletteResponse

from mfnav_api.adapters.routers import api_router, metrics_router
from mfnav_api.config.settings import Settings, get_settings
from mfnav_api.domain.exceptions.base import DomainError
from mfnav_api.infrastructure.http.errors import (
    handle_domain_error,
    handle_http_exception,
    handle_unhandled_exception,
    handle_validation_error,
)
from mfnav_api.infrastructure.http.middleware.trace import TraceIdMiddleware
from mfnav_api.infrastructure.logging.logger import (
    configure_root_logging,
    get_json_logger,
)

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
configure_root_logging()
logger = get_json_logger(__name__)


# -----------------------------------------------------------------------------
# Stable generator
# -----------------------------------------------------------------------------
def _stable_operation_id(route: APIRoute) -> str:
    """Deterministic operationId to stop OpenAPI snapshot churn.

    Format:
        "<methods>_<path>", e.g. "get__api_fund-nav".

    Args:
        route: FastAPI APIRoute.

    Returns:
        str: Stable operationId for OpenAPI.
    """
    methods = ",".join(sorted(route.methods or []))
    path = route.path_format.replace("/", "_").replace("{", "").replace("}", "")
    return f"{methods.lower()}_{path.lower()}"


# -----------------------------------------------------------------------------
# Lifespan
# -----------------------------------------------------------------------------
@asynccontextmanager
async def runtime_lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the shared upstream HTTP client and close it on shutdown.

    Args:
        app: FastAPI application instance.

    Yields:
        None: Control back to FastAPI to serve requests.
    """
    settings: Settings = app.state.settings
    client_kwargs: dict[str, Any] = {}
    if settings.mfapi_timeout_s is not None:
        client_kwargs["timeout"] = settings.mfapi_timeout_s

    async with httpx.AsyncClient(**client_kwargs) as http_client:
        app.state.http_client = http_client
        logger.info("http_client_opened", extra={"extra": {"timeout_s": settings.mfapi_timeout_s}})
        try:
            yield
        finally:
            app.state.http_client = None
            logger.info("http_client_closed")


# -----------------------------------------------------------------------------
# Middleware & CORS
# -----------------------------------------------------------------------------
def _attach_cors(app: FastAPI, settings: Settings) -> None:
    """Attach CORS middleware based on settings.

    Args:
        app: FastAPI application.
        settings: Runtime settings containing CORS config.
    """
    allow_origins = settings.cors_allow_origins or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        # Browsers refuse credentialed requests against a wildcard origin.
        allow_credentials=allow_origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _patch_exception_handlers(app: FastAPI) -> None:
    """Install the ``{"error": ...}`` exception handlers.

    Args:
        app: FastAPI application.
    """

    async def _domain_error_handler(request: Request, exc: Exception) -> StarletteResponse:
        if not isinstance(exc, DomainError):
            raise exc
        return await handle_domain_error(request, exc)

    async def _http_error_handler(request: Request, exc: Exception) -> StarletteResponse:
        if not isinstance(exc, HTTPException):
            raise exc
        return await handle_http_exception(request, exc)

    async def _validation_error_handler(request: Request, exc: Exception) -> StarletteResponse:
        if not isinstance(exc, RequestValidationError):
            raise exc
        return await handle_validation_error(request, exc)

    async def _unhandled_error_handler(request: Request, exc: Exception) -> StarletteResponse:
        return await handle_unhandled_exception(request, exc)

    app.add_exception_handler(DomainError, _domain_error_handler)
    app.add_exception_handler(HTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)


# -----------------------------------------------------------------------------
# App factory
# -----------------------------------------------------------------------------
def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Explicit settings (tests); defaults to the cached singleton.

    Returns:
        FastAPI: Fully configured application instance.
    """
    settings = settings or get_settings()
    service_version = settings.service_version or "0.0.0"

    app = FastAPI(
        title="Mutual Fund NAV API",
        version=service_version,
        description="Proxy over the mfapi.in scheme endpoint with date-range filtering.",
        lifespan=runtime_lifespan,
        generate_unique_id_function=_stable_operation_id,
    )
    app.state.settings = settings
    app.state.http_client = None

    # Attach trace-id middleware early so logs can correlate requests.
    app.add_middleware(TraceIdMiddleware)

    _patch_exception_handlers(app)

    app.add_middleware(GZipMiddleware, minimum_size=1024)
    _attach_cors(app, settings)

    app.include_router(api_router)
    app.include_router(metrics_router)

    logger.info(
        "service_startup",
        extra={
            "extra": {
                "service": settings.service_name,
                "env": settings.environment.value,
                "version": service_version,
                "status": "starting",
            }
        },
    )
    return app


# Eager app for ASGI servers and the serverless handler.
app: FastAPI = create_app()


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run(
        "mfnav_api.main:create_app",
        factory=True,
        host="127.0.0.1",
        port=int(os.getenv("PORT", "8080")),
        reload=True,
    )
