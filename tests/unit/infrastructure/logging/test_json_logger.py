from __future__ import annotations

import json
import logging
import sys

from mfnav_api.infrastructure.logging.logger import (
    _JsonFormatter,
    configure_root_logging,
    get_json_logger,
    set_request_context,
)


def _record(msg: str, **attrs: object) -> logging.LogRecord:
    rec = logging.LogRecord("mfnav.test", logging.INFO, __file__, 1, msg, None, None)
    for k, v in attrs.items():
        setattr(rec, k, v)
    return rec


def test_formatter_emits_stable_keys_and_merges_extra() -> None:
    out = json.loads(_JsonFormatter().format(_record("hello", extra={"fund": 119551})))
    assert out["level"] == "INFO"
    assert out["logger"] == "mfnav.test"
    assert out["message"] == "hello"
    assert out["fund"] == 119551
    assert "ts" in out


def test_formatter_includes_correlation_ids_from_context() -> None:
    set_request_context(request_id="rid-1", trace_id="tid-1")
    try:
        out = json.loads(_JsonFormatter().format(_record("x")))
    finally:
        set_request_context(request_id="", trace_id="")
    assert out["request_id"] == "rid-1"
    assert out["trace_id"] == "tid-1"


def test_formatter_includes_exception_fields() -> None:
    try:
        raise ValueError("bad nav")
    except ValueError:
        rec = _record("failed", exc_info=sys.exc_info())
    out = json.loads(_JsonFormatter().format(rec))
    assert out["exc_type"] == "ValueError"
    assert out["exc_message"] == "bad nav"


def test_configure_root_logging_is_idempotent() -> None:
    configure_root_logging("debug")
    before = len(logging.getLogger().handlers)
    configure_root_logging("INFO")
    assert len(logging.getLogger().handlers) == before
    assert logging.getLogger().level == logging.INFO
    assert get_json_logger("mfnav.any").propagate is True
