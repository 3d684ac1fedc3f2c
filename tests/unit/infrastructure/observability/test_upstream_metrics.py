from __future__ import annotations

import pytest
from prometheus_client import REGISTRY

from mfnav_api.infrastructure.observability.metrics import (
    get_fund_nav_requests_total,
    get_upstream_errors_total,
    get_upstream_latency_seconds,
    observe_upstream_request,
)


def _sample(name: str, labels: dict[str, str]) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_getters_are_idempotent() -> None:
    assert get_upstream_latency_seconds() is get_upstream_latency_seconds()
    assert get_upstream_errors_total() is get_upstream_errors_total()
    assert get_fund_nav_requests_total() is get_fund_nav_requests_total()


def test_success_observes_latency_without_error() -> None:
    count_before = _sample("mfnav_upstream_latency_seconds_count", {"outcome": "success"})
    with observe_upstream_request():
        pass
    assert _sample("mfnav_upstream_latency_seconds_count", {"outcome": "success"}) == count_before + 1


def test_marked_error_increments_reason_counter() -> None:
    before = _sample("mfnav_upstream_errors_total", {"reason": "decode"})
    with observe_upstream_request() as obs:
        obs.mark_error("decode")
    assert _sample("mfnav_upstream_errors_total", {"reason": "decode"}) == before + 1


def test_escaping_exception_is_counted() -> None:
    before = _sample("mfnav_upstream_errors_total", {"reason": "exception"})
    with pytest.raises(RuntimeError), observe_upstream_request():
        raise RuntimeError("x")
    assert _sample("mfnav_upstream_errors_total", {"reason": "exception"}) == before + 1
