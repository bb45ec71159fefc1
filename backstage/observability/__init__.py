"""Observability package for the Work-Order Service."""

from backstage.observability.metrics import (
    observe_request_latency,
    increment_work_orders_stored,
    increment_status_update,
    increment_notification_published,
    increment_order_message,
    increment_error,
    get_metrics_content,
    MetricsErrorType,
    OrderMessageOutcome,
)

__all__ = [
    "get_metrics_content",
    "observe_request_latency",
    "increment_work_orders_stored",
    "increment_status_update",
    "increment_notification_published",
    "increment_order_message",
    "increment_error",
    "MetricsErrorType",
    "OrderMessageOutcome",
]
