# Copyright (c)
# SPDX-License-Identifier: MIT
"""NAV query validation and date-range filtering (Domain Service).

Synopsis:
    Pure functions that validate the inbound query (fund id and the optional
    ``start``/``end`` pair) and select the NAV points that fall inside an
    inclusive date range. No I/O; the current time is passed in by callers.

Layer:
    domain/services
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import UTC, date, datetime

from mfnav_api.domain.entities.fund import NAV_DATE_FORMAT, DateRange, NavPoint
from mfnav_api.domain.exceptions.fund_nav import BadRequest

__all__ = [
    "filter_nav_points",
    "parse_fund_id",
    "parse_nav_date",
    "resolve_date_range",
]

_NAV_DATE_RE = re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_nav_date(value: str) -> date | None:
    """Parse a ``dd-mm-yyyy`` string; return ``None`` when it is not one.

    Day and month must be two digits and the year four, matching the
    provider's format exactly.
    """
    if not _NAV_DATE_RE.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, NAV_DATE_FORMAT).date()
    except ValueError:
        return None


def parse_fund_id(raw: str | None) -> int:
    """Validate the ``mutualFundID`` query value.

    Args:
        raw: Raw query value, ``None`` when absent.

    Returns:
        int: The parsed scheme code.

    Raises:
        BadRequest: If the value is missing or not an integer.
    """
    if raw is None or raw == "":
        raise BadRequest("mutualFundID query parameter is required")
    if not _INTEGER_RE.fullmatch(raw):
        raise BadRequest("mutualFundID must be an integer")
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise BadRequest("mutualFundID must be an integer")
    return value


def resolve_date_range(start: str | None, end: str | None, *, now: datetime) -> DateRange | None:
    """Validate the optional ``start``/``end`` pair.

    Args:
        start: Raw ``start`` query value (``dd-mm-yyyy``) or ``None``.
        end: Raw ``end`` query value (``dd-mm-yyyy``) or ``None``.
        now: Current aware datetime used for the "future end" check.

    Returns:
        DateRange | None: The validated range, or ``None`` when neither bound
        was supplied (no filtering).

    Raises:
        BadRequest: On a half-open pair, malformed dates, an ``end`` in the
            future, or ``start`` after ``end``.
    """
    if not start and not end:
        return None
    if not start or not end:
        raise BadRequest("both start and end dates are required in the format dd-mm-yyyy")

    start_day = parse_nav_date(start)
    if start_day is None:
        raise BadRequest("invalid start date format. use dd-mm-yyyy")
    end_day = parse_nav_date(end)
    if end_day is None:
        raise BadRequest("invalid end date format. use dd-mm-yyyy")

    # A bare date means midnight UTC of that day.
    end_instant = datetime(end_day.year, end_day.month, end_day.day, tzinfo=UTC)
    if end_instant > now:
        raise BadRequest("end date cannot be in the future")
    if start_day > end_day:
        raise BadRequest("start date cannot be after end date")

    return DateRange(start=start_day, end=end_day)


def filter_nav_points(points: Iterable[NavPoint], date_range: DateRange | None) -> list[NavPoint]:
    """Return the points inside ``date_range``, preserving input order.

    Points whose date cannot be parsed are dropped, even when no range is
    given.
    """
    kept: list[NavPoint] = []
    for point in points:
        day = parse_nav_date(point.date)
        if day is None:
            continue
        if date_range is None or date_range.contains(day):
            kept.append(point)
    return kept
