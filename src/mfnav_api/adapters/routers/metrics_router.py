# Copyright (c)
# SPDX-License-Identifier: MIT
"""Prometheus scrape endpoint (`/metrics`).

Collectors are created lazily, so the scrape handler touches each getter first
to make the upstream and request series visible on a cold start.

Layer:
    adapters/routers
"""

from __future__ import annotations

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from mfnav_api.infrastructure.observability.metrics import (
    get_fund_nav_requests_total,
    get_upstream_errors_total,
    get_upstream_latency_seconds,
)

router = APIRouter()


@router.get("/metrics", include_in_schema=False)
async def metrics_endpoint() -> Response:
    """Expose Prometheus metrics in the text exposition format."""
    get_upstream_latency_seconds()
    get_upstream_errors_total()
    get_fund_nav_requests_total()
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
