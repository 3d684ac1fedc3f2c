# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Base HTTP Schema (Adapters Layer)

Purpose:
    Canonical Pydantic base for all adapter-layer HTTP schemas.
    Enforces strict config and deterministic JSON encoding.

Layer: adapters/schemas/http

Notes:
    - Transport-facing only. Application DTOs must not import from this module.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseHTTPSchema(BaseModel):
    """Base class for all HTTP-facing schemas.

    Field declaration order is the serialized key order, so identical
    inputs always encode to identical bytes.
    """

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        frozen=True,
    )

    def model_dump_http(self) -> bytes:
        """Return compact JSON bytes for an HTTP body, omitting ``None`` fields."""
        return self.model_dump_json(exclude_none=True).encode("utf-8")
