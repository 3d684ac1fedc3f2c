# Copyright (c)
# SPDX-License-Identifier: MIT
"""HTTP Schemas package (Adapters Layer).

Purpose:
    Public, adapter-facing HTTP schema surface used by routers and presenters.
    BaseHTTPSchema stays internal to this package.

Layer:
    adapters/schemas/http
"""

from __future__ import annotations

from mfnav_api.adapters.schemas.http.fund_nav import (
    CronResponse,
    ErrorResponse,
    FundMetaSchema,
    FundNavResponse,
    NavPointSchema,
)

__all__ = [
    "CronResponse",
    "ErrorResponse",
    "FundMetaSchema",
    "FundNavResponse",
    "NavPointSchema",
]
