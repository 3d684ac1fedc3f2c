from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from mfnav_api.config.settings import Settings
from mfnav_api.main import create_app


@pytest.fixture(scope="module")
def client() -> TestClient:
    return TestClient(create_app(Settings(_env_file=None)))  # type: ignore[call-arg]


def test_healthz(client: TestClient) -> None:
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_metrics_exposes_service_collectors(client: TestClient) -> None:
    r = client.get("/metrics")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/plain")
    text = r.text
    assert "mfnav_upstream_latency_seconds" in text
    assert "mfnav_upstream_errors_total" in text
    assert "mfnav_fund_nav_requests_total" in text


def test_openapi_has_stable_operation_ids(client: TestClient) -> None:
    spec = client.get("/openapi.json").json()
    assert spec["paths"]["/api/fund-nav"]["get"]["operationId"] == "get__api_fund-nav"
    assert spec["paths"]["/healthz"]["get"]["operationId"] == "get__healthz"
    params = {p["name"] for p in spec["paths"]["/api/fund-nav"]["get"]["parameters"]}
    assert params == {"mutualFundID", "start", "end"}


def test_cors_preflight_allows_any_origin_by_default(client: TestClient) -> None:
    r = client.options(
        "/api/fund-nav",
        headers={"Origin": "https://ui.example", "Access-Control-Request-Method": "GET"},
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"
