"""
Prometheus Metrics for the Work-Order Service.

DATA FLOW:
    This file                  presentation/api/metrics.py         Observability Stack
    ─────────                  ────────────────────────────         ───────────────────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus ──► Grafana

METRIC TYPES:
    - Counter: Value only goes up (total count, e.g., total requests)
    - Histogram: Distribution (for percentiles like P95, e.g., latency)
"""

from prometheus_client import (
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
    ["method", "route", "http_status_code"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2, 5],
)

WORK_ORDERS_STORED_TOTAL = Counter(
    "backstage_work_orders_stored_total",
    "Total number of work orders written to the store",
)

STATUS_UPDATES_TOTAL = Counter(
    "backstage_status_updates_total",
    "Total number of persisted work order status changes",
    ["status"],
)

NOTIFICATIONS_PUBLISHED_TOTAL = Counter(
    "backstage_notifications_published_total",
    "Total number of status notifications published",
    ["status"],
)

ORDER_MESSAGES_TOTAL = Counter(
    "backstage_order_messages_total",
    "Total number of inbound order messages by outcome",
    ["outcome"],
)

ERRORS_TOTAL = Counter(
    "backstage_errors_total",
    "Total number of errors by type",
    ["error_type"],
)


# =============================================================================
# LABEL CONSTANTS (avoid hardcoding strings throughout codebase)
# =============================================================================
class MetricsErrorType:
    """Error type labels for backstage_errors_total metric."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"
    INTERNAL = "internal"


class OrderMessageOutcome:
    """Outcome labels for backstage_order_messages_total metric."""

    CREATED = "created"
    REJECTED = "rejected"
    UNDECODABLE = "undecodable"
    FAILED = "failed"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Call to record request latency. Integration point: fastapi_app.py middleware"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_work_orders_stored():
    """Integration point: infrastructure/persistence/redis_work_order_repository.py"""
    WORK_ORDERS_STORED_TOTAL.inc()


def increment_status_update(status: str):
    """Integration point: infrastructure/persistence/redis_work_order_repository.py"""
    STATUS_UPDATES_TOTAL.labels(status=status).inc()


def increment_notification_published(status: str):
    """Integration point: infrastructure/messaging/redis_stream_notification_adapter.py"""
    NOTIFICATIONS_PUBLISHED_TOTAL.labels(status=status).inc()


def increment_order_message(outcome: str):
    """Integration point: infrastructure/messaging/order_consumer.py"""
    ORDER_MESSAGES_TOTAL.labels(outcome=outcome).inc()


def increment_error(error_type: str):
    """
    Call to record an error occurrence.

    Integration points:
        - fastapi_app.py exception handlers: validation, not_found, invalid_argument, internal

    Args:
        error_type: One of MetricsErrorType
    """
    ERRORS_TOTAL.labels(error_type=error_type).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Called by: presentation/api/metrics.py

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


# =============================================================================
# EXPORTS
# =============================================================================
__all__ = [
    "observe_request_latency",
    "increment_work_orders_stored",
    "increment_status_update",
    "increment_notification_published",
    "increment_order_message",
    "increment_error",
    "get_metrics_content",
    "MetricsErrorType",
    "OrderMessageOutcome",
]
