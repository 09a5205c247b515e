"""Observability module for logging, request context and metrics."""

from fulfillment_bridge.observability.context import (
    get_request_id,
    request_context,
    set_request_id,
)
from fulfillment_bridge.observability.logging import configure_logging, get_logger
from fulfillment_bridge.observability.metrics import (
    record_product_synced,
    record_upstream_request,
    record_webhook,
)

__all__ = [
    # Context
    "get_request_id",
    "set_request_id",
    "request_context",
    # Metrics
    "record_webhook",
    "record_upstream_request",
    "record_product_synced",
    # Logging
    "configure_logging",
    "get_logger",
]
