# src/mfnav_api/domain/entities/fund.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Mutual Fund NAV (Domain Entities).

Synopsis:
    Immutable primitives for a mutual fund scheme and its NAV history as
    published by the upstream NAV provider. Dates and NAV values are kept as
    the provider's strings (``dd-mm-yyyy`` and decimal text) so values pass
    through the service without float rounding.

Layer:
    domain/entities
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from mfnav_api.domain.entities.base import BaseEntity

NAV_DATE_FORMAT = "%d-%m-%Y"


@dataclass(frozen=True)
class FundMetadata(BaseEntity):
    """Descriptive metadata for a single mutual fund scheme.

    Attributes:
        fund_house: Asset-management company offering the scheme.
        scheme_type: Provider classification (e.g., "Open Ended Schemes").
        scheme_category: Provider category label.
        scheme_code: Numeric scheme identifier.
        scheme_name: Human-readable scheme name.
    """

    fund_house: str = ""
    scheme_type: str = ""
    scheme_category: str = ""
    scheme_code: int = 0
    scheme_name: str = ""

    @property
    def is_empty(self) -> bool:
        """Return True when every field holds its zero value.

        The provider answers unknown scheme codes with HTTP 200 and an empty
        ``meta`` object, so this is how an unknown id is detected.
        """
        return (
            not self.fund_house
            and not self.scheme_type
            and not self.scheme_category
            and self.scheme_code == 0
            and not self.scheme_name
        )


@dataclass(frozen=True)
class NavPoint(BaseEntity):
    """A single (date, NAV) observation.

    Attributes:
        date: Observation date as ``dd-mm-yyyy``.
        nav: Net asset value as a decimal string.
    """

    date: str
    nav: str


@dataclass(frozen=True)
class FundRecord(BaseEntity):
    """Scheme metadata plus its NAV series in provider order."""

    meta: FundMetadata
    data: tuple[NavPoint, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DateRange(BaseEntity):
    """Inclusive calendar date range ``[start, end]``."""

    start: date
    end: date

    def __post_init__(self) -> None:
        """Enforce ordering of the bounds."""
        super().__post_init__()
        if self.start > self.end:
            raise ValueError("DateRange.start must be <= DateRange.end.")

    def contains(self, day: date) -> bool:
        """Return True if ``day`` falls within the range (inclusive)."""
        return self.start <= day <= self.end

    @property
    def label(self) -> str:
        """Return the human-readable period, e.g. ``01-01-2023 to 31-01-2023``."""
        return f"{self.start.strftime(NAV_DATE_FORMAT)} to {self.end.strftime(NAV_DATE_FORMAT)}"


@dataclass(frozen=True)
class FilteredFundNav(BaseEntity):
    """Outgoing view of a fund: metadata, optional period, filtered points."""

    meta: FundMetadata
    data: tuple[NavPoint, ...]
    period: str | None = None
