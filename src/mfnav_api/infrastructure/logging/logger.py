# src/mfnav_api/infrastructure/logging/logger.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Structured JSON logging utilities.

This module exposes an idempotent root configurator and a per-module logger
factory that produce JSON logs suitable for ingestion by log pipelines.

Features:
    * Stable keys: ``ts``, ``level``, ``logger``, ``message``.
    * Automatic enrichment with ``request_id`` and ``trace_id`` via contextvars.
    * Fallback enrichment via record attributes.
    * Structured fields passed as ``extra={"extra": {...}}`` are merged in.

Typical usage:
    configure_root_logging()
    log = get_json_logger(__name__)
"""

from __future__ import annotations

import json
import logging
import os
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

__all__ = [
    "configure_root_logging",
    "get_json_logger",
    "get_request_id",
    "get_trace_id",
    "set_request_context",
]

# Per-request correlation context (task-local via contextvars).
_REQUEST_ID_CTX: ContextVar[str | None] = ContextVar("mfnav_request_id", default=None)
_TRACE_ID_CTX: ContextVar[str | None] = ContextVar("mfnav_trace_id", default=None)


def set_request_context(*, request_id: str | None = None, trace_id: str | None = None) -> None:
    """Set per-request correlation identifiers on the current context.

    Args:
        request_id: Correlation identifier from ``X-Request-ID``, if any.
        trace_id: Per-request trace identifier, if any.

    Notes:
        Additive: passing only one argument updates that value and leaves the
        other unchanged.
    """
    if request_id is not None:
        _REQUEST_ID_CTX.set(request_id)
    if trace_id is not None:
        _TRACE_ID_CTX.set(trace_id)


def get_request_id() -> str | None:
    """Return the current request id from contextvars, if any."""
    return _REQUEST_ID_CTX.get(None)


def get_trace_id() -> str | None:
    """Return the current trace id from contextvars, if any."""
    return _TRACE_ID_CTX.get(None)


class _JsonFormatter(logging.Formatter):
    """JSON log formatter emitting stable keys and optional extras."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON object.

        Args:
            record: Logging record.

        Returns:
            JSON-encoded log line.
        """
        ts = datetime.now(tz=UTC).isoformat()
        payload: dict[str, Any] = {
            "ts": ts,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        rid: str | None = getattr(record, "request_id", None) or _REQUEST_ID_CTX.get(None)
        if rid:
            payload["request_id"] = rid

        tid: str | None = getattr(record, "trace_id", None) or _TRACE_ID_CTX.get(None)
        if tid:
            payload["trace_id"] = tid

        # Exceptions: guard against None in exc_info tuple.
        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            if exc_type is not None:
                payload["exc_type"] = exc_type.__name__
            if exc_value is not None:
                payload["exc_message"] = str(exc_value)

        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)

        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)


def configure_root_logging(level: str | int | None = None) -> None:
    """Initialize the root logger with a JSON stream handler (idempotent).

    Args:
        level: Logging level or level name. If ``None``, use env ``LOG_LEVEL`` or ``INFO``.
    """
    root = logging.getLogger()

    env_level = os.getenv("LOG_LEVEL")
    resolved: int | str = (
        level if level is not None else (env_level.upper() if env_level else "INFO")
    )
    if isinstance(resolved, str):
        resolved = resolved.upper()
    root.setLevel(resolved)

    if root.handlers:
        # Already configured; prevent duplicate handlers on hot reload.
        return

    handler = logging.StreamHandler()
    handler.setFormatter(_JsonFormatter())
    root.addHandler(handler)


def get_json_logger(name: str) -> logging.Logger:
    """Return a module-specific logger backed by the JSON root handler.

    This does *not* implicitly configure the root logger. Call
    :func:`configure_root_logging` once at startup for global defaults.

    Args:
        name: Logger name, typically ``__name__`` of the caller.

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(name)
    # Delegate formatting and level to the root logger.
    logger.propagate = True
    return logger
