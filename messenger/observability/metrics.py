"""
Prometheus Metrics for the messenger services.

DATA FLOW:
    This file                  presentation/api/metrics.py        Scraper
    ─────────                  ───────────────────────────        ───────
    Define metrics ──────────► /metrics endpoint ──────────────►  Prometheus

All services in one process share the default registry; the "service" label
tells them apart.

METRIC TYPES:
    - Gauge: Value goes up/down (current count, e.g., open connections)
    - Counter: Value only goes up (total count, e.g., messages sent)
    - Histogram: Distribution (for percentiles like P95, e.g., latency)
"""

from prometheus_client import (
    Gauge,
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["service", "method", "route", "http_status_code"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5],
)

MESSAGES_SENT_TOTAL = Counter(
    "messenger_messages_sent_total",
    "Total number of direct messages stored",
)

ACTIVE_CONNECTIONS = Gauge(
    "messenger_active_connections",
    "Number of registered client connections",
)

CONNECTIONS_SWEPT_TOTAL = Counter(
    "messenger_connections_swept_total",
    "Total number of connections removed for inactivity",
)

PUSHES_TOTAL = Counter(
    "messenger_pushes_total",
    "Total number of pushes handed to the push gateway",
    ["type"],
)

ERRORS_TOTAL = Counter(
    "messenger_errors_total",
    "Total number of error responses by type",
    ["service", "error_type"],
)


# =============================================================================
# LABEL CONSTANTS
# =============================================================================
class MetricsErrorType:
    """Error type labels for messenger_errors_total metric."""

    VALIDATION = "validation"
    HTTP = "http"
    INTERNAL = "internal"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def observe_request_latency(
    service: str, method: str, route: str, status_code: int, duration: float
):
    """Called by the request logging middleware in presentation/app_factory.py"""
    REQUEST_LATENCY.labels(
        service=service,
        method=method,
        route=route,
        http_status_code=str(status_code),
    ).observe(duration)


def increment_messages_sent():
    MESSAGES_SENT_TOTAL.inc()


def set_active_connections(count: int):
    ACTIVE_CONNECTIONS.set(count)


def increment_connections_swept(count: int):
    CONNECTIONS_SWEPT_TOTAL.inc(count)


def increment_pushes(push_type: str):
    PUSHES_TOTAL.labels(type=push_type).inc()


def increment_error(service: str, error_type: str):
    ERRORS_TOTAL.labels(service=service, error_type=error_type).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "observe_request_latency",
    "increment_messages_sent",
    "set_active_connections",
    "increment_connections_swept",
    "increment_pushes",
    "increment_error",
    "get_metrics_content",
    "MetricsErrorType",
]
