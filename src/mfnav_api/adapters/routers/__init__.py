"""Routers Package Export (Adapters Layer).

Purpose:
    Stable exports for the router aggregator (`api_router`) and the metrics
    router (`metrics_router`) imported by the application factory.

Layer:
    adapters/routers
"""

from __future__ import annotations

from .api_router import router as api_router  # noqa: F401
from .metrics_router import router as metrics_router  # noqa: F401

__all__ = ["api_router", "metrics_router"]
