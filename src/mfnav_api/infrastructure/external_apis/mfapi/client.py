# src/mfnav_api/infrastructure/external_apis/mfapi/client.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""mfapi.in Transport Client (async, instrumented).

This transport is framework-agnostic and provides:

* One async HTTP GET (httpx) per call to ``<base_url>/<scheme code>``.
* Decoding of the JSON body into a :class:`FundRecord`.
* A single failure type for callers: :class:`UpstreamError`, raised for
  transport errors and for undecodable bodies alike.
* Prometheus latency/error metrics and trace-id propagation.

There are no retries, and the HTTP status is not inspected: the provider
reports unknown scheme codes with HTTP 200 and empty metadata, and any other
body is either decodable or an :class:`UpstreamError`.
"""

from __future__ import annotations

from typing import Any, Final

import httpx
from pydantic import ValidationError

from mfnav_api.domain.entities.fund import FundRecord
from mfnav_api.domain.exceptions.fund_nav import UpstreamError
from mfnav_api.infrastructure.external_apis.mfapi.settings import MfapiSettings
from mfnav_api.infrastructure.external_apis.mfapi.types import MfapiSchemePayload
from mfnav_api.infrastructure.logging.logger import get_json_logger, get_request_id, get_trace_id
from mfnav_api.infrastructure.observability.metrics import observe_upstream_request

logger = get_json_logger(__name__)

_DEFAULT_HEADERS: Final[dict[str, str]] = {
    "Accept": "application/json",
    "User-Agent": "mfnav-api/1.0",
}


class MfapiClient:
    """Transport client for the mfapi.in scheme endpoint."""

    def __init__(
        self,
        settings: MfapiSettings,
        *,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the transport client.

        Args:
            settings: Provider settings loaded from environment or DI.
            http: Optional shared ``httpx.AsyncClient``. If omitted, a client
                is created and owned by this instance.
        """
        self._settings = settings
        self._base_url = str(settings.base_url).rstrip("/")

        client_kwargs: dict[str, Any] = {}
        if settings.timeout_s is not None:
            client_kwargs["timeout"] = settings.timeout_s

        self._owns_client = http is None
        self._client = http or httpx.AsyncClient(**client_kwargs)

    @property
    def base_url(self) -> str:
        """Normalized base URL (no trailing slash)."""
        return self._base_url

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance owns it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> MfapiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def url_for(self, mutual_fund_id: str) -> str:
        """Return the provider URL for ``mutual_fund_id``."""
        return f"{self._base_url}/{mutual_fund_id}"

    async def fetch_fund(self, mutual_fund_id: str) -> FundRecord:
        """Fetch and decode one scheme.

        Args:
            mutual_fund_id: Scheme code as supplied by the caller.

        Returns:
            FundRecord: Decoded metadata and NAV series (provider order).

        Raises:
            UpstreamError: On transport failure or an undecodable body.
        """
        url = self.url_for(mutual_fund_id)

        # Defaults go on every request; a shared client carries none of its own.
        headers: dict[str, str] = _DEFAULT_HEADERS.copy()
        request_id = get_request_id()
        trace_id = get_trace_id()
        if request_id:
            headers["X-Request-ID"] = request_id
        if trace_id:
            headers["x-trace-id"] = trace_id

        request_kwargs: dict[str, Any] = {"headers": headers}
        if self._settings.timeout_s is not None:
            request_kwargs["timeout"] = self._settings.timeout_s

        with observe_upstream_request() as obs:
            try:
                # httpx reads the whole body and releases the connection here.
                response = await self._client.get(url, **request_kwargs)
            except httpx.HTTPError as exc:
                obs.mark_error("transport")
                logger.warning(
                    "mfapi.fetch_failed",
                    extra={"extra": {"url": url, "error": str(exc), "reason": "transport"}},
                )
                raise UpstreamError(f"error fetching data from API: {exc}") from exc

            try:
                payload = MfapiSchemePayload.model_validate_json(response.content)
            except ValidationError as exc:
                obs.mark_error("decode")
                logger.warning(
                    "mfapi.decode_failed",
                    extra={
                        "extra": {
                            "url": url,
                            "status": response.status_code,
                            "reason": "decode",
                            "error_count": exc.error_count(),
                        }
                    },
                )
                raise UpstreamError(f"error decoding API response: {_first_error(exc)}") from exc

            logger.info(
                "mfapi.fetch_ok",
                extra={
                    "extra": {
                        "url": url,
                        "status": response.status_code,
                        "points": len(payload.data),
                        "elapsed_ms": round(obs.elapsed * 1000.0, 2),
                    }
                },
            )
        return payload.to_domain()


def _first_error(exc: ValidationError) -> str:
    """Return a compact, single-line description of the first validation error."""
    errors = exc.errors(include_url=False)
    if not errors:
        return str(exc)
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    msg = str(first.get("msg", "invalid payload"))
    return f"{loc}: {msg}" if loc else msg
