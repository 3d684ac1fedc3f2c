# Copyright (c)
# SPDX-License-Identifier: MIT
"""Application DTOs for the fund NAV query.

Layer:
    application/schemas/dto
"""

from __future__ import annotations

from mfnav_api.application.schemas.dto.base import BaseDTO


class FundNavQueryDTO(BaseDTO):
    """Raw, not-yet-validated NAV query as received from a caller.

    Values are kept verbatim (no whitespace stripping) so that validation
    messages reflect exactly what was sent.

    Attributes:
        mutual_fund_id: Scheme code (``mutualFundID``), ``None`` when absent.
        start: Inclusive start date (``dd-mm-yyyy``), ``None`` when absent.
        end: Inclusive end date (``dd-mm-yyyy``), ``None`` when absent.
    """

    mutual_fund_id: str | None = None
    start: str | None = None
    end: str | None = None
