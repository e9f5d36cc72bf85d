"""
File: instrumentation.py
Purpose: Prometheus metrics collectors for the status API.

Exports:
  - REQUESTS(route, method, status): count HTTP requests
  - LATENCY(route): request latency histogram
  - render_metrics(): (content_type, payload) for the /metrics route
"""

from fastapi import FastAPI
from prometheus_client import Counter, Histogram, CollectorRegistry, CONTENT_TYPE_LATEST, generate_latest

# Own registry so repeated app construction in tests does not re-register collectors globally
REGISTRY = CollectorRegistry(auto_describe=True)

REQUESTS = Counter(
    "status_api_requests_total",
    "Total API requests",
    labelnames=["route", "method", "status"],
    registry=REGISTRY,
)

LATENCY = Histogram(
    "status_api_latency_seconds",
    "API latency in seconds",
    labelnames=["route"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1),
    registry=REGISTRY,
)

def setup_metrics(app: FastAPI) -> None:
    """Attach registry to app.state for /metrics endpoint to read."""
    app.state.prom_registry = REGISTRY

def render_metrics():
    """Return (content_type, payload) for a Starlette/FastAPI Response."""
    return CONTENT_TYPE_LATEST, generate_latest(REGISTRY)
