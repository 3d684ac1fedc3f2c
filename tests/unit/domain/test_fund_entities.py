from __future__ import annotations

import dataclasses
from datetime import date

import pytest

from mfnav_api.domain.entities.fund import DateRange, FundMetadata, NavPoint
from mfnav_api.domain.exceptions.base import DomainError
from mfnav_api.domain.exceptions.fund_nav import (
    BadRequest,
    InternalServerError,
    Unauthorized,
    UpstreamError,
)


def test_default_metadata_is_empty() -> None:
    assert FundMetadata().is_empty


@pytest.mark.parametrize(
    "kwargs",
    [
        {"fund_house": "HDFC Mutual Fund"},
        {"scheme_type": "Open Ended Schemes"},
        {"scheme_category": "Equity"},
        {"scheme_code": 119551},
        {"scheme_name": "Top 100"},
    ],
)
def test_any_populated_field_makes_metadata_non_empty(kwargs: dict[str, object]) -> None:
    assert not FundMetadata(**kwargs).is_empty  # type: ignore[arg-type]


def test_entities_are_immutable() -> None:
    p = NavPoint(date="01-01-2023", nav="1.0")
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.nav = "2.0"  # type: ignore[misc]


def test_date_range_rejects_inverted_bounds() -> None:
    with pytest.raises(ValueError):
        DateRange(start=date(2023, 2, 1), end=date(2023, 1, 1))


def test_date_range_contains_is_inclusive() -> None:
    rng = DateRange(start=date(2023, 1, 1), end=date(2023, 1, 31))
    assert rng.contains(date(2023, 1, 1))
    assert rng.contains(date(2023, 1, 31))
    assert not rng.contains(date(2023, 2, 1))
    assert rng.label == "01-01-2023 to 31-01-2023"


def test_error_taxonomy_status_codes() -> None:
    assert BadRequest("x").http_status == 400
    assert InternalServerError("x").http_status == 500
    assert Unauthorized().http_status == 401
    assert Unauthorized().message == "Unauthorized"

    err = UpstreamError("error fetching data from API: boom")
    assert isinstance(err, InternalServerError)
    assert isinstance(err, DomainError)
    assert err.http_status == 500
