"""Prometheus metrics definitions and recording."""

from prometheus_client import Counter, Histogram

WEBHOOKS_TOTAL = Counter(
    "bridge_webhooks_total",
    "Inbound webhook deliveries by source and outcome",
    ["source", "outcome"],
)

UPSTREAM_REQUESTS_TOTAL = Counter(
    "bridge_upstream_requests_total",
    "Outbound API calls by service and outcome",
    ["service", "outcome"],
)

UPSTREAM_REQUEST_DURATION = Histogram(
    "bridge_upstream_request_duration_seconds",
    "Duration of outbound API calls in seconds",
    ["service"],
)

PRODUCTS_SYNCED_TOTAL = Counter(
    "bridge_products_synced_total",
    "Products pushed from FinerWorks into Shopify",
)


def record_webhook(source: str, outcome: str) -> None:
    """Record an inbound webhook (outcome: accepted, rejected, failed)."""
    WEBHOOKS_TOTAL.labels(source=source, outcome=outcome).inc()


def record_upstream_request(service: str, outcome: str, duration: float) -> None:
    """Record an outbound call (outcome: ok, http_error, network_error)."""
    UPSTREAM_REQUESTS_TOTAL.labels(service=service, outcome=outcome).inc()
    UPSTREAM_REQUEST_DURATION.labels(service=service).observe(duration)


def record_product_synced() -> None:
    """Record a product created in Shopify by a sync run."""
    PRODUCTS_SYNCED_TOTAL.inc()
