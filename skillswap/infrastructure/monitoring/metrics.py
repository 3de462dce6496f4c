"""
Prometheus metrics for system monitoring.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

registry = CollectorRegistry()


def get_registry() -> CollectorRegistry:
    """Get the application registry."""
    return registry


API_REQUESTS = Counter(
    "api_requests_total",
    "Total number of API requests",
    ["method", "endpoint", "status_code"],
    registry=registry,
)

API_REQUEST_DURATION = Histogram(
    "api_request_duration_seconds",
    "Time spent processing API requests",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0],
    registry=registry,
)

EXCHANGE_TRANSITIONS = Counter(
    "exchange_transitions_total",
    "Exchange status transitions applied",
    ["status"],
    registry=registry,
)

FEEDBACK_REJECTED = Counter(
    "feedback_duplicates_rejected_total",
    "Reviews and reports rejected by the uniqueness guard",
    ["kind"],
    registry=registry,
)

ERRORS_TOTAL = Counter(
    "errors_total",
    "Total number of errors",
    ["error_type"],
    registry=registry,
)


def record_api_request(method: str, endpoint: str, status_code: int, duration: float):
    """Record a completed HTTP request."""
    API_REQUESTS.labels(
        method=method, endpoint=endpoint, status_code=str(status_code)
    ).inc()
    API_REQUEST_DURATION.labels(method=method, endpoint=endpoint).observe(duration)


def record_exchange_transition(status: str):
    """Record an applied exchange status change."""
    EXCHANGE_TRANSITIONS.labels(status=status).inc()


def record_duplicate_feedback(kind: str):
    """Record a review or report rejected as duplicate."""
    FEEDBACK_REJECTED.labels(kind=kind).inc()


def record_error(error_type: str):
    """Record an error surfaced to a client."""
    ERRORS_TOTAL.labels(error_type=error_type).inc()


def get_metrics() -> bytes:
    """Render all metrics in the Prometheus text format."""
    return generate_latest(registry)


def get_metrics_content_type() -> str:
    return CONTENT_TYPE_LATEST
