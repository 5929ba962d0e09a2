"""Prometheus instrumentation for outgoing API calls."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNTER = Counter(
    "entro_api_requests_total",
    "Logical API calls completed by the client",
    ["method", "outcome"],
)
RETRY_COUNTER = Counter(
    "entro_api_retries_total",
    "Retries scheduled by the client",
    ["method", "reason"],
)
REQUEST_LATENCY = Histogram(
    "entro_api_request_latency_seconds",
    "Latency of a logical API call including backoff",
    ["method"],
)

__all__ = ["REQUEST_COUNTER", "RETRY_COUNTER", "REQUEST_LATENCY"]
