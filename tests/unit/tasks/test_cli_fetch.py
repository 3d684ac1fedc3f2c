from __future__ import annotations

import json
from typing import Any

import httpx
import respx
from typer.testing import CliRunner

from mfnav_api.config.settings import DEFAULT_MFAPI_BASE_URL
from mfnav_api.tasks.cli import EXIT_BAD_REQUEST, EXIT_INTERNAL_ERROR, app

runner = CliRunner()


@respx.mock
def test_fetch_prints_filtered_body(scheme_payload: dict[str, Any]) -> None:
    respx.get(f"{DEFAULT_MFAPI_BASE_URL}/119551").mock(
        return_value=httpx.Response(200, json=scheme_payload)
    )

    result = runner.invoke(
        app, ["fetch", "119551", "--start", "01-01-2023", "--end", "31-01-2023"]
    )

    assert result.exit_code == 0, result.output
    body = json.loads(result.stdout)
    assert body["period"] == "01-01-2023 to 31-01-2023"
    assert [p["date"] for p in body["data"]] == ["31-01-2023", "15-01-2023", "01-01-2023"]


@respx.mock
def test_fetch_honours_base_url_option(scheme_payload: dict[str, Any]) -> None:
    route = respx.get("https://mirror.example.test/mf/119551").mock(
        return_value=httpx.Response(200, json=scheme_payload)
    )

    result = runner.invoke(
        app, ["fetch", "119551", "--base-url", "https://mirror.example.test/mf"]
    )

    assert result.exit_code == 0, result.output
    assert route.called
    assert "period" not in json.loads(result.stdout)


def test_fetch_rejects_bad_id_without_network() -> None:
    with respx.mock(assert_all_called=False) as mock:
        result = runner.invoke(app, ["fetch", "abc"])
        assert not mock.calls

    assert result.exit_code == EXIT_BAD_REQUEST
    assert '{"error": "mutualFundID must be an integer"}' in result.output


@respx.mock
def test_fetch_upstream_failure_exits_with_internal_code() -> None:
    respx.get(f"{DEFAULT_MFAPI_BASE_URL}/119551").mock(side_effect=httpx.ConnectError("down"))

    result = runner.invoke(app, ["fetch", "119551"])

    assert result.exit_code == EXIT_INTERNAL_ERROR
    assert "error fetching data from API" in result.output
