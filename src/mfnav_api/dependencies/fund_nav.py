# src/mfnav_api/dependencies/fund_nav.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Dependency wiring for the fund NAV endpoint.

Overview:
    Provides the FastAPI dependency that builds a :class:`GetFundNavUseCase`
    backed by the mfapi.in client.

Design:
    * Settings come from ``app.state.settings`` (resolved once at startup).
    * The shared ``httpx.AsyncClient`` from the application lifespan is reused
      when present; otherwise the client owns a short-lived one and closes it
      once the response is produced (e.g. when the lifespan did not run).
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Any

from fastapi import Request

from mfnav_api.application.use_cases.get_fund_nav import GetFundNavUseCase
from mfnav_api.config.settings import Settings, get_settings
from mfnav_api.infrastructure.external_apis.mfapi.client import MfapiClient
from mfnav_api.infrastructure.external_apis.mfapi.settings import MfapiSettings


def app_settings(request: Request) -> Settings:
    """Return the settings bound to the running app, falling back to the cached singleton."""
    settings: Any = getattr(request.app.state, "settings", None)
    if isinstance(settings, Settings):
        return settings
    return get_settings()


async def get_fund_nav_use_case(request: Request) -> AsyncGenerator[GetFundNavUseCase, None]:
    """Yield a configured GetFundNavUseCase instance.

    Yields:
        GetFundNavUseCase: Use case wired to the NAV provider client.
    """
    settings = app_settings(request)
    shared_http = getattr(request.app.state, "http_client", None)
    client = MfapiClient(MfapiSettings.from_app_settings(settings), http=shared_http)
    try:
        yield GetFundNavUseCase(gateway=client)
    finally:
        await client.aclose()
