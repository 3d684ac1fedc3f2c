# Copyright (c)
# SPDX-License-Identifier: MIT
"""Presenter: fund NAV domain result → HTTP body.

Layer:
    adapters/presenters
"""

from __future__ import annotations

from pydantic_core import PydanticSerializationError

from mfnav_api.adapters.schemas.http.fund_nav import (
    FundMetaSchema,
    FundNavResponse,
    NavPointSchema,
)
from mfnav_api.domain.entities.fund import FilteredFundNav
from mfnav_api.domain.exceptions.fund_nav import InternalServerError


class FundNavPresenter:
    """Shape a :class:`FilteredFundNav` into the public JSON contract."""

    @staticmethod
    def to_schema(result: FilteredFundNav) -> FundNavResponse:
        meta = result.meta
        return FundNavResponse(
            meta=FundMetaSchema(
                fund_house=meta.fund_house,
                scheme_type=meta.scheme_type,
                scheme_category=meta.scheme_category,
                scheme_code=meta.scheme_code,
                scheme_name=meta.scheme_name,
            ),
            period=result.period,
            data=[NavPointSchema(date=p.date, nav=p.nav) for p in result.data],
        )

    def render(self, result: FilteredFundNav) -> bytes:
        """Return the JSON body for ``result``.

        Raises:
            InternalServerError: If the body cannot be encoded.
        """
        try:
            return self.to_schema(result).model_dump_http()
        except (PydanticSerializationError, ValueError, TypeError) as exc:
            raise InternalServerError("error creating JSON response") from exc
