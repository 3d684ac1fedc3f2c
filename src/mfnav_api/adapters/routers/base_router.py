# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Base Router (Adapters Layer)

Purpose:
    Canonical APIRouter wrapper for the service's HTTP endpoints:
      - Stable prefix per surface (e.g., "/api").
      - Standard error response documentation using ErrorResponse.

Layer:
    adapters/routers
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any

from fastapi import APIRouter

from mfnav_api.adapters.schemas.http.fund_nav import ErrorResponse
from mfnav_api.infrastructure.logging.logger import get_json_logger

_LOGGER = get_json_logger(__name__)

TagType = str | Enum


class BaseRouter(APIRouter):
    """Canonical router wrapper.

    Args:
        prefix: Path prefix shared by all routes on this router.
        tags: Default tags applied to all routes mounted on this router.
        **kwargs: Additional APIRouter kwargs.
    """

    def __init__(
        self,
        *,
        prefix: str = "/api",
        tags: Sequence[TagType] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            prefix=prefix,
            tags=list(tags) if tags is not None else None,
            **kwargs,
        )
        _LOGGER.debug(
            "router_initialized",
            extra={"extra": {"prefix": prefix, "tags": [str(t) for t in tags or []]}},
        )

    @staticmethod
    def std_error_responses() -> dict[int | str, dict[str, Any]]:
        """Return the error response mapping for OpenAPI.

        Returns:
            Mapping from HTTP status code → OpenAPI response object.
        """
        return {
            400: {"model": ErrorResponse, "description": "Invalid query parameters or unknown fund."},
            500: {"model": ErrorResponse, "description": "Upstream or encoding failure."},
        }
