# Copyright (c)
# SPDX-License-Identifier: MIT
"""Application Port: Fund data gateway.

Provider-agnostic capability used by the NAV use case to load one scheme's
metadata and NAV history, without binding to an HTTP client.
"""

from __future__ import annotations

from typing import Protocol

from mfnav_api.domain.entities.fund import FundRecord


class FundDataGateway(Protocol):
    """Protocol for fetching a single fund's NAV history."""

    async def fetch_fund(self, mutual_fund_id: str) -> FundRecord:
        """Fetch metadata and NAV series for ``mutual_fund_id``.

        Args:
            mutual_fund_id: Scheme code exactly as supplied by the caller.

        Returns:
            FundRecord: Decoded record. Unknown ids yield empty metadata
            rather than an error.

        Raises:
            UpstreamError: On transport or decoding failure.
        """
        ...
