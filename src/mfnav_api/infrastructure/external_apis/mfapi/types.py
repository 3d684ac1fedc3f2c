# Copyright (c)
# SPDX-License-Identifier: MIT
"""Wire models for the mfapi.in scheme payload.

Shape::

    {
      "meta": {"fund_house": ..., "scheme_type": ..., "scheme_category": ...,
               "scheme_code": 120503, "scheme_name": ...},
      "data": [{"date": "dd-mm-yyyy", "nav": "123.4560"}, ...],
      "status": "SUCCESS"
    }

Unknown fields (``status``, ISIN codes, ...) are ignored and missing fields
fall back to zero values, so an unknown scheme decodes to empty metadata.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from mfnav_api.domain.entities.fund import FundMetadata, FundRecord, NavPoint


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class MfapiMeta(_WireModel):
    """Scheme metadata as sent by the provider."""

    fund_house: str = ""
    scheme_type: str = ""
    scheme_category: str = ""
    scheme_code: int = 0
    scheme_name: str = ""

    @field_validator("fund_house", "scheme_type", "scheme_category", "scheme_name", mode="before")
    @classmethod
    def _null_to_empty(cls, v: object) -> object:
        return "" if v is None else v

    @field_validator("scheme_code", mode="before")
    @classmethod
    def _null_code_to_zero(cls, v: object) -> object:
        return 0 if v is None else v


class MfapiNavPoint(_WireModel):
    """One ``{"date", "nav"}`` entry."""

    date: str = ""
    nav: str = ""


class MfapiSchemePayload(_WireModel):
    """Top-level scheme payload."""

    meta: MfapiMeta = Field(default_factory=MfapiMeta)
    data: list[MfapiNavPoint] = Field(default_factory=list)

    @field_validator("meta", "data", mode="before")
    @classmethod
    def _null_to_default(cls, v: object, info: ValidationInfo) -> object:
        if v is None:
            return {} if info.field_name == "meta" else []
        return v

    def to_domain(self) -> FundRecord:
        """Map the wire payload to a :class:`FundRecord`."""
        meta = FundMetadata(
            fund_house=self.meta.fund_house,
            scheme_type=self.meta.scheme_type,
            scheme_category=self.meta.scheme_category,
            scheme_code=self.meta.scheme_code,
            scheme_name=self.meta.scheme_name,
        )
        return FundRecord(
            meta=meta,
            data=tuple(NavPoint(date=p.date, nav=p.nav) for p in self.data),
        )
