# src/mfnav_api/infrastructure/observability/metrics.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""NAV proxy observability helpers and Prometheus metrics.

Collectors (names are part of the public contract):

* ``mfnav_upstream_latency_seconds`` (Histogram, label ``outcome``)
* ``mfnav_upstream_errors_total`` (Counter, label ``reason``)
* ``mfnav_fund_nav_requests_total`` (Counter, label ``status``)

All collectors are created against the *current* default registry
(:data:`prometheus_client.REGISTRY`). If a collector with the same name is
already registered (module re-import, reloaded app in tests), the existing
instance is reused instead of registering a duplicate.
"""

from __future__ import annotations

from collections.abc import Generator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from time import perf_counter
from typing import TypeVar

import prometheus_client as prom
from prometheus_client import Counter, Histogram
from prometheus_client.registry import CollectorRegistry

_C = TypeVar("_C", Counter, Histogram)


def _get_or_create(
    kind: type[_C],
    name: str,
    doc: str,
    labelnames: Sequence[str] = (),
) -> _C:
    """Return a collector of ``kind`` bound to the current default registry.

    Args:
        kind: Collector class (:class:`Counter` or :class:`Histogram`).
        name: Metric name.
        doc: Human-readable metric description.
        labelnames: Label names.

    Returns:
        The existing collector with that name, or a newly registered one.
    """
    registry: CollectorRegistry = prom.REGISTRY
    # Internal but stable in prometheus_client. Counters register under their
    # base name without the ``_total`` suffix.
    mapping = getattr(registry, "_names_to_collectors", {})
    existing = mapping.get(name) or mapping.get(name.removesuffix("_total"))
    if isinstance(existing, kind):
        return existing

    try:
        return kind(name, doc, tuple(labelnames), registry=registry)
    except ValueError as exc:
        if "Duplicated timeseries" in str(exc):
            mapping = getattr(registry, "_names_to_collectors", {})
            again = mapping.get(name)
            if isinstance(again, kind):
                return again
        raise


def get_upstream_latency_seconds() -> Histogram:
    """Return the upstream fetch latency histogram."""
    return _get_or_create(
        Histogram,
        "mfnav_upstream_latency_seconds",
        "Latency of NAV provider calls (seconds).",
        labelnames=("outcome",),
    )


def get_upstream_errors_total() -> Counter:
    """Return the upstream error counter."""
    return _get_or_create(
        Counter,
        "mfnav_upstream_errors_total",
        "Errors encountered when calling the NAV provider.",
        labelnames=("reason",),
    )


def get_fund_nav_requests_total() -> Counter:
    """Return the fund NAV request counter (by response status)."""
    return _get_or_create(
        Counter,
        "mfnav_fund_nav_requests_total",
        "Fund NAV requests served, labelled by HTTP status.",
        labelnames=("status",),
    )


@dataclass
class UpstreamObservation:
    """State captured while observing one upstream call.

    Attributes:
        start: Monotonic start time in seconds.
        outcome: ``"success"`` or ``"error"``.
        error_reason: Short, machine-readable error reason if any.
    """

    start: float = field(default_factory=perf_counter)
    outcome: str = "success"
    error_reason: str | None = None

    def mark_error(self, reason: str) -> None:
        """Mark the call as failed with ``reason`` (e.g. ``"transport"``)."""
        self.outcome = "error"
        self.error_reason = reason

    @property
    def elapsed(self) -> float:
        """Seconds since the observation started."""
        return perf_counter() - self.start


@contextmanager
def observe_upstream_request() -> Generator[UpstreamObservation, None, None]:
    """Observe a NAV provider request.

    Records a latency sample and, when :meth:`UpstreamObservation.mark_error`
    was invoked or an exception escaped, an error increment.

    Yields:
        A mutable :class:`UpstreamObservation`.
    """
    obs = UpstreamObservation()
    try:
        yield obs
    except Exception:
        if obs.error_reason is None:
            obs.mark_error("exception")
        raise
    finally:
        get_upstream_latency_seconds().labels(outcome=obs.outcome).observe(obs.elapsed)
        if obs.error_reason is not None:
            get_upstream_errors_total().labels(reason=obs.error_reason).inc()
