# Copyright (c)
# SPDX-License-Identifier: MIT
"""HTTP contracts for the fund NAV and cron endpoints.

Layer: adapters/schemas/http
"""

from __future__ import annotations

from pydantic import Field

from mfnav_api.adapters.schemas.http.base import BaseHTTPSchema


class FundMetaSchema(BaseHTTPSchema):
    """Scheme metadata, copied verbatim from the provider."""

    fund_house: str = Field(..., examples=["HDFC Mutual Fund"])
    scheme_type: str = Field(..., examples=["Open Ended Schemes"])
    scheme_category: str = Field(..., examples=["Equity Scheme - Large Cap Fund"])
    scheme_code: int = Field(..., examples=[119551])
    scheme_name: str = Field(..., examples=["HDFC Top 100 Fund - Direct Plan - Growth"])


class NavPointSchema(BaseHTTPSchema):
    """One NAV observation."""

    date: str = Field(..., description="Observation date (dd-mm-yyyy).", examples=["15-01-2023"])
    nav: str = Field(..., description="NAV as a decimal string.", examples=["812.45100"])


class FundNavResponse(BaseHTTPSchema):
    """Successful fund NAV body.

    ``period`` is present only when both ``start`` and ``end`` were supplied.
    """

    meta: FundMetaSchema
    period: str | None = Field(
        default=None,
        description="Requested range as 'dd-mm-yyyy to dd-mm-yyyy'.",
        examples=["01-01-2023 to 31-01-2023"],
    )
    data: list[NavPointSchema] = Field(default_factory=list)


class ErrorResponse(BaseHTTPSchema):
    """Error body: ``{"error": "<message>"}``."""

    error: str = Field(..., examples=["mutualFundID must be an integer"])


class CronResponse(BaseHTTPSchema):
    """Body returned by the scheduled endpoint."""

    data: str = Field(..., examples=["Hello, Cron!"])
