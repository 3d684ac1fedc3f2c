# Copyright (c)
# SPDX-License-Identifier: MIT
"""Liveness endpoint (Adapters Layer).

The service holds no connections of its own beyond the outbound HTTP pool, so
liveness is the only check; it never calls the upstream provider.
"""

from __future__ import annotations

import typing as t

from fastapi import APIRouter, status

from mfnav_api.adapters.schemas.http.base import BaseHTTPSchema

router = APIRouter()


class LivenessResponse(BaseHTTPSchema):
    """Liveness body."""

    status: t.Literal["ok"] = "ok"


@router.get(
    "/healthz",
    response_model=LivenessResponse,
    status_code=status.HTTP_200_OK,
    summary="Liveness check",
    tags=["Health"],
)
async def liveness() -> LivenessResponse:
    return LivenessResponse()
