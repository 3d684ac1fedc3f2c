# Copyright (c)
# SPDX-License-Identifier: MIT
"""mfnav CLI: operational commands.

Commands:
    fetch    Fetch one scheme's NAV history (optionally date-filtered) and
             print the same JSON body the HTTP endpoint returns.

Environment:
    MFAPI_BASE_URL    Provider base URL (default https://api.mfapi.in/mf).
    MFAPI_TIMEOUT_S   Optional per-request timeout in seconds.
"""

from __future__ import annotations

import asyncio
import json
from typing import NoReturn

import typer

from mfnav_api.adapters.presenters.fund_nav_presenter import FundNavPresenter
from mfnav_api.application.schemas.dto.fund_nav import FundNavQueryDTO
from mfnav_api.application.use_cases.get_fund_nav import GetFundNavUseCase
from mfnav_api.domain.exceptions.fund_nav import BadRequest, InternalServerError
from mfnav_api.infrastructure.external_apis.mfapi.client import MfapiClient
from mfnav_api.infrastructure.external_apis.mfapi.settings import MfapiSettings
from mfnav_api.infrastructure.http.errors import error_envelope
from mfnav_api.infrastructure.logging.logger import configure_root_logging, get_json_logger

configure_root_logging()
log = get_json_logger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)

EXIT_BAD_REQUEST = 1
EXIT_INTERNAL_ERROR = 2


@app.callback()
def main() -> None:
    """Mutual fund NAV tooling."""


@app.command("fetch")
def fetch(
    mutual_fund_id: str = typer.Argument(..., help="Scheme code (integer)."),  # noqa: B008
    start: str | None = typer.Option(None, help="Start date (dd-mm-yyyy)."),  # noqa: B008
    end: str | None = typer.Option(None, help="End date (dd-mm-yyyy)."),  # noqa: B008
    base_url: str | None = typer.Option(
        None, envvar="MFAPI_BASE_URL", help="Provider base URL."
    ),  # noqa: B008
) -> None:
    """Fetch a scheme's NAV history and print it as JSON.

    Exit codes:
        0 on success, 1 on invalid input or unknown scheme, 2 on upstream or
        encoding failure.
    """
    settings = MfapiSettings(base_url=base_url) if base_url else MfapiSettings()
    q = FundNavQueryDTO(mutual_fund_id=mutual_fund_id, start=start, end=end)

    async def _run() -> bytes:
        async with MfapiClient(settings) as client:
            result = await GetFundNavUseCase(gateway=client).execute(q)
        return FundNavPresenter().render(result)

    try:
        body = asyncio.run(_run())
    except BadRequest as exc:
        _fail(exc.message, EXIT_BAD_REQUEST)
    except InternalServerError as exc:
        _fail(exc.message, EXIT_INTERNAL_ERROR)

    log.info(
        "cli.fetch.done",
        extra={"extra": {"mutual_fund_id": mutual_fund_id, "bytes": len(body)}},
    )
    typer.echo(body.decode("utf-8"))


def _fail(message: str, code: int) -> NoReturn:
    log.warning("cli.fetch.failed", extra={"extra": {"error": message, "exit_code": code}})
    typer.echo(json.dumps(error_envelope(message)), err=True)
    raise typer.Exit(code=code)


if __name__ == "__main__":  # pragma: no cover
    app()
