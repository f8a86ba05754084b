"""Prometheus metrics helpers."""

from __future__ import annotations

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

REGISTRY = CollectorRegistry()

DRAWS_TOTAL = Counter(
    "side_effects_draws_total",
    "Number of random values drawn",
    labelnames=("kind",),
    registry=REGISTRY,
)

REQUEST_LATENCY = Histogram(
    "side_effects_request_latency_seconds",
    "Latency of HTTP requests by route",
    labelnames=("route",),
    buckets=(0.001, 0.003, 0.005, 0.01, 0.02, 0.04, 0.08, 0.16, 0.32),
    registry=REGISTRY,
)


def observe_draw(kind: str) -> None:
    DRAWS_TOTAL.labels(kind=kind).inc()


def observe_request(*, route: str, latency_ms: float) -> None:
    REQUEST_LATENCY.labels(route=route).observe(latency_ms / 1000.0)


def render_metrics() -> tuple[bytes, str]:
    payload = generate_latest(REGISTRY)
    return payload, CONTENT_TYPE_LATEST
