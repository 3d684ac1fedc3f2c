# Copyright (c)
# SPDX-License-Identifier: MIT
"""Fund NAV Router.

Synopsis:
    HTTP surface for one scheme's NAV history. Reads the raw query values,
    invokes `GetFundNavUseCase`, and writes the JSON body.

Design:
    * Presentation-only: builds the query DTO, delegates to the use case,
      renders through the presenter.
    * Query values are declared as plain optional strings so that every
      validation message comes from the use case, not from FastAPI.
    * Domain errors propagate to the app-level handlers, which emit
      ``{"error": "<message>"}`` bodies.

Layer:
    adapters/routers
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query, Request, Response, status

from mfnav_api.adapters.presenters.fund_nav_presenter import FundNavPresenter
from mfnav_api.adapters.routers.base_router import BaseRouter
from mfnav_api.adapters.schemas.http.fund_nav import FundNavResponse
from mfnav_api.application.schemas.dto.fund_nav import FundNavQueryDTO
from mfnav_api.application.use_cases.get_fund_nav import GetFundNavUseCase
from mfnav_api.dependencies.fund_nav import get_fund_nav_use_case
from mfnav_api.domain.exceptions.base import DomainError
from mfnav_api.infrastructure.observability.metrics import get_fund_nav_requests_total

router = BaseRouter(prefix="/api", tags=["Fund NAV"])

_presenter = FundNavPresenter()


def _first_value(request: Request, name: str) -> str | None:
    """Return the first occurrence of query parameter ``name``, or ``None``."""
    values = request.query_params.getlist(name)
    return values[0] if values else None


@router.get(
    "/fund-nav",
    response_model=FundNavResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    responses=BaseRouter.std_error_responses(),
    summary="Get NAV history for a mutual fund scheme",
    description=(
        "Returns scheme metadata and its NAV series from the upstream provider. "
        "When both `start` and `end` (dd-mm-yyyy) are given, only points in the "
        "inclusive range are returned and `period` is set. When a parameter is "
        "repeated, its first value is used."
    ),
)
async def get_fund_nav(
    request: Request,
    uc: Annotated[GetFundNavUseCase, Depends(get_fund_nav_use_case)],
    # Declared for the OpenAPI contract; values are read first-wins below.
    mutual_fund_id: Annotated[
        str | None, Query(alias="mutualFundID", description="Scheme code (integer).")
    ] = None,
    start: Annotated[str | None, Query(description="Start date (dd-mm-yyyy).")] = None,
    end: Annotated[str | None, Query(description="End date (dd-mm-yyyy).")] = None,
) -> Response:
    """Return the (optionally date-filtered) NAV history of a scheme."""
    q = FundNavQueryDTO(
        mutual_fund_id=_first_value(request, "mutualFundID"),
        start=_first_value(request, "start"),
        end=_first_value(request, "end"),
    )
    counter = get_fund_nav_requests_total()
    try:
        result = await uc.execute(q)
        body = _presenter.render(result)
    except DomainError as exc:
        counter.labels(status=str(exc.http_status)).inc()
        raise

    counter.labels(status="200").inc()
    return Response(content=body, status_code=status.HTTP_200_OK, media_type="application/json")
