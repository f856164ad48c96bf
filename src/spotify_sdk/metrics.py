"""Observability sinks receiving one event per physical HTTP attempt."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from prometheus_client import CollectorRegistry, Histogram, generate_latest

logger = logging.getLogger("spotify_sdk.metrics")

LATENCY_BUCKETS = (0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0)


@dataclass(frozen=True)
class ExecutionEvent:
    elapsed: float
    status_code: int
    route: str
    method: str = "GET"


class ObservabilitySink(Protocol):
    def record(self, event: ExecutionEvent) -> None:  # pragma: no cover - interface
        ...


class NullSink:
    def record(self, event: ExecutionEvent) -> None:
        return None


class LoggingSink:
    def __init__(self, level: int = logging.DEBUG) -> None:
        self._level = level

    def record(self, event: ExecutionEvent) -> None:
        logger.log(
            self._level,
            "spotify request method=%s route=%s status=%s elapsed_ms=%.1f",
            event.method,
            event.route,
            event.status_code,
            event.elapsed * 1000,
        )


class PrometheusSink:
    """Records request latency into a ``prometheus_client`` histogram.

    Each sink owns its histogram inside the given registry; a private registry is
    created when none is supplied so that several clients can coexist.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None, *, namespace: str = "spotify") -> None:
        self.registry = registry if registry is not None else CollectorRegistry()
        self.latency = Histogram(
            "request_latency_seconds",
            "Spotify HTTP request latency.",
            ["status_code", "route"],
            namespace=namespace,
            registry=self.registry,
            buckets=LATENCY_BUCKETS,
        )

    def record(self, event: ExecutionEvent) -> None:
        self.latency.labels(status_code=str(event.status_code), route=event.route).observe(event.elapsed)

    def exposition(self) -> bytes:
        return generate_latest(self.registry)


__all__ = [
    "ExecutionEvent",
    "LATENCY_BUCKETS",
    "LoggingSink",
    "NullSink",
    "ObservabilitySink",
    "PrometheusSink",
]
