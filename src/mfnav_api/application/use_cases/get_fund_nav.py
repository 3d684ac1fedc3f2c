# src/mfnav_api/application/use_cases/get_fund_nav.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Use case: Get fund NAV history.

Synopsis:
    Validates a NAV query, loads the scheme from the fund data gateway, and
    narrows its NAV series to the requested date range.

Responsibilities:
    * Validate ``mutualFundID`` and the optional ``start``/``end`` pair before
      any upstream call is made.
    * Fetch exactly once from the gateway.
    * Reject unknown schemes (provider returns empty metadata).
    * Filter points by the inclusive range, keeping provider order.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from mfnav_api.application.interfaces.fund_data_gateway import FundDataGateway
from mfnav_api.application.schemas.dto.fund_nav import FundNavQueryDTO
from mfnav_api.domain.entities.fund import FilteredFundNav
from mfnav_api.domain.exceptions.fund_nav import BadRequest
from mfnav_api.domain.services.nav_query import (
    filter_nav_points,
    parse_fund_id,
    resolve_date_range,
)
from mfnav_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


class GetFundNavUseCase:
    """Fetch one scheme's NAV history and filter it by date range."""

    def __init__(
        self,
        *,
        gateway: FundDataGateway,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._gateway = gateway
        self._clock = clock

    async def execute(self, q: FundNavQueryDTO) -> FilteredFundNav:
        """Execute the use case.

        Args:
            q: Raw query values.

        Returns:
            FilteredFundNav: Metadata, filtered points, and the period label
            when a range was supplied.

        Raises:
            BadRequest: On invalid input or an unknown scheme code.
            UpstreamError: When the provider cannot be reached or decoded.
        """
        parse_fund_id(q.mutual_fund_id)
        date_range = resolve_date_range(q.start, q.end, now=self._clock())

        # parse_fund_id guarantees a non-empty id here.
        fund_id = q.mutual_fund_id or ""
        record = await self._gateway.fetch_fund(fund_id)

        if record.meta.is_empty:
            logger.info(
                "fund_nav.unknown_scheme",
                extra={"extra": {"mutual_fund_id": fund_id}},
            )
            raise BadRequest("Invalid mutualFundID")

        points = filter_nav_points(record.data, date_range)
        return FilteredFundNav(
            meta=record.meta,
            data=tuple(points),
            period=date_range.label if date_range is not None else None,
        )
