from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any

import httpx
import respx

from mfnav_api.config.settings import DEFAULT_MFAPI_BASE_URL
from mfnav_api.serverless import handler


def _http_api_event(path: str, query: str = "", method: str = "GET") -> dict[str, Any]:
    """Minimal API Gateway HTTP API (payload v2.0) event."""
    return {
        "version": "2.0",
        "routeKey": "$default",
        "rawPath": path,
        "rawQueryString": query,
        "cookies": [],
        "headers": {"host": "api.example.test", "accept": "application/json"},
        "requestContext": {
            "accountId": "123456789012",
            "apiId": "api-id",
            "domainName": "api.example.test",
            "domainPrefix": "api",
            "requestId": "req-lambda-1",
            "routeKey": "$default",
            "stage": "$default",
            "time": "15/Jun/2024:12:00:00 +0000",
            "timeEpoch": 1718452800000,
            "http": {
                "method": method,
                "path": path,
                "protocol": "HTTP/1.1",
                "sourceIp": "127.0.0.1",
                "userAgent": "pytest",
            },
        },
        "isBase64Encoded": False,
    }


def _context() -> SimpleNamespace:
    return SimpleNamespace(function_name="mfnav-api", aws_request_id="req-lambda-1")


def test_handler_returns_validation_error_body() -> None:
    with respx.mock(assert_all_called=False) as upstream:
        resp = handler(_http_api_event("/api/fund-nav", "mutualFundID=abc"), _context())

        assert not upstream.calls

    assert resp["statusCode"] == 400
    assert json.loads(resp["body"]) == {"error": "mutualFundID must be an integer"}


def test_handler_proxies_known_scheme(scheme_payload: dict[str, Any]) -> None:
    with respx.mock(assert_all_called=False) as upstream:
        route = upstream.get(f"{DEFAULT_MFAPI_BASE_URL}/119551").mock(
            return_value=httpx.Response(200, json=scheme_payload)
        )

        resp = handler(_http_api_event("/api/fund-nav", "mutualFundID=119551"), _context())

        assert route.call_count == 1

    assert resp["statusCode"] == 200
    body = json.loads(resp["body"])
    assert body["meta"]["scheme_code"] == 119551
    assert body["data"] == scheme_payload["data"]
    assert "period" not in body
