# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Fund NAV Domain Exceptions

Purpose:
    Error conditions raised while validating a NAV query, talking to the
    upstream NAV provider, or authorizing the scheduled endpoint. Each class
    carries the HTTP status it maps to; adapters turn them into responses.

Layer: domain/exceptions
"""
from __future__ import annotations

from .base import DomainError


class BadRequest(DomainError):
    """Client-supplied input is invalid (malformed id/dates, unknown fund)."""

    code = "BAD_REQUEST"
    http_status = 400


class InternalServerError(DomainError):
    """The request could not be completed for a server-side reason."""

    code = "INTERNAL_ERROR"
    http_status = 500


class UpstreamError(InternalServerError):
    """The NAV provider could not be reached or returned an undecodable body."""

    code = "UPSTREAM_ERROR"


class Unauthorized(DomainError):
    """Caller did not present the expected bearer secret."""

    code = "UNAUTHORIZED"
    http_status = 401

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)
