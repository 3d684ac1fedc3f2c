# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator
from datetime import UTC, datetime
from typing import Any

import pytest

# Pin a deterministic environment before any application module is imported.
os.environ["ENVIRONMENT"] = "test"
for _name in ("CRON_SECRET", "ALLOWED_ORIGINS", "MFAPI_BASE_URL", "MFAPI_TIMEOUT_S"):
    os.environ.pop(_name, None)

from mfnav_api.config.settings import DEFAULT_MFAPI_BASE_URL, get_settings  # noqa: E402

FIXED_NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Generator[None, None, None]:
    """Ensure every test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mfapi_base_url() -> str:
    return DEFAULT_MFAPI_BASE_URL


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture
def scheme_payload() -> dict[str, Any]:
    """Provider body for a known scheme, newest point first like mfapi.in."""
    return {
        "meta": {
            "fund_house": "HDFC Mutual Fund",
            "scheme_type": "Open Ended Schemes",
            "scheme_category": "Equity Scheme - Large Cap Fund",
            "scheme_code": 119551,
            "scheme_name": "HDFC Top 100 Fund - Direct Plan - Growth",
        },
        "data": [
            {"date": "01-02-2023", "nav": "800.00000"},
            {"date": "31-01-2023", "nav": "799.50000"},
            {"date": "15-01-2023", "nav": "812.45100"},
            {"date": "01-01-2023", "nav": "790.12300"},
            {"date": "31-12-2022", "nav": "788.00000"},
        ],
        "status": "SUCCESS",
    }


@pytest.fixture
def unknown_scheme_payload() -> dict[str, Any]:
    """Provider body for an unknown scheme code (HTTP 200, empty meta)."""
    return {"meta": {}, "data": [], "status": "SUCCESS"}
