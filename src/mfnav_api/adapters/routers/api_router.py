# src/mfnav_api/adapters/routers/api_router.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""API Router Aggregator (Adapters Layer).

Purpose:
    Compose and expose the top-level `router` that includes all feature routers.

Responsibilities:
    • Mount liveness at `/healthz`.
    • Mount the fund NAV endpoint at `/api/fund-nav`.
    • Mount the scheduled endpoint at `/api/cron`.

Layer:
    adapters/routers
"""

from __future__ import annotations

from fastapi import APIRouter

from mfnav_api.adapters.routers.cron_router import router as cron_router
from mfnav_api.adapters.routers.fund_nav_router import router as fund_nav_router
from mfnav_api.adapters.routers.health_router import router as health_router

router = APIRouter()

router.include_router(health_router)

# BaseRouter already carries the /api prefix.
router.include_router(fund_nav_router)
router.include_router(cron_router)
