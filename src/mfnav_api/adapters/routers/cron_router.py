# Copyright (c)
# SPDX-License-Identifier: MIT
"""Scheduled-invocation endpoint (`/api/cron`).

The scheduler calls this route with ``Authorization: Bearer <CRON_SECRET>``.
Every standard method in ``CRON_METHODS`` is accepted. A missing header, a
wrong secret, or an unconfigured secret all yield ``401`` with a plain-text
``Unauthorized`` body.

Layer:
    adapters/routers
"""

from __future__ import annotations

import hmac
from typing import Annotated

from fastapi import Depends, Header, Request, status

from mfnav_api.adapters.routers.base_router import BaseRouter
from mfnav_api.adapters.schemas.http.fund_nav import CronResponse
from mfnav_api.config.settings import Settings
from mfnav_api.dependencies.fund_nav import app_settings
from mfnav_api.domain.exceptions.fund_nav import Unauthorized
from mfnav_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)
router = BaseRouter(prefix="/api", tags=["Cron"])

CRON_GREETING = "Hello, Cron!"
_BEARER_PREFIX = "Bearer "
CRON_METHODS: tuple[str, ...] = (
    "GET",
    "HEAD",
    "POST",
    "PUT",
    "PATCH",
    "DELETE",
    "OPTIONS",
    "TRACE",
)


def is_authorized(authorization: str | None, secret: str | None) -> bool:
    """Return True when ``authorization`` is exactly ``"Bearer " + secret``.

    An unset or blank secret never authorizes.
    """
    if not secret or authorization is None:
        return False
    expected = (_BEARER_PREFIX + secret).encode("utf-8")
    return hmac.compare_digest(authorization.encode("utf-8"), expected)


async def run_cron(
    request: Request,
    settings: Annotated[Settings, Depends(app_settings)],
    authorization: Annotated[str | None, Header()] = None,
) -> CronResponse:
    """Acknowledge an authorized scheduler call."""
    if not is_authorized(authorization, settings.cron_secret_value()):
        logger.warning(
            "cron.unauthorized",
            extra={
                "extra": {
                    "method": request.method,
                    "has_authorization": authorization is not None,
                }
            },
        )
        raise Unauthorized()

    logger.info("cron.invoked", extra={"extra": {"method": request.method}})
    return CronResponse(data=CRON_GREETING)


# One route per method so each gets its own OpenAPI operationId.
for _method in CRON_METHODS:
    router.add_api_route(
        "/cron",
        run_cron,
        methods=[_method],
        response_model=CronResponse,
        status_code=status.HTTP_200_OK,
        responses={401: {"description": "Missing or wrong bearer secret (plain text)."}},
        summary="Scheduled job entry point",
    )
