"""Pytest configuration and fixtures."""

import json
import sys
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from fulfillment_bridge.config import Settings  # noqa: E402

WEBHOOK_SECRET = "test-webhook-secret"


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def settings() -> Settings:
    """Explicit settings so tests never depend on the process environment."""
    return Settings(
        shopify_store_domain="test-store.myshopify.com",
        shopify_access_token="shpat_test",
        shopify_api_version="2025-01",
        shopify_location_id="987654321",
        shopify_webhook_secret=WEBHOOK_SECRET,
        finerworks_api_base="https://api.finerworks.test/v3",
        finerworks_api_key="fw-app-key",
        finerworks_web_api_key="fw-web-key",
        log_json=True,
    )


@pytest.fixture
def sample_shopify_order() -> dict:
    """Sample Shopify orders/create payload."""
    return {
        "id": 1001,
        "email": "customer@example.com",
        "shipping_address": {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "address1": "12 Analytical Row",
            "address2": None,
            "city": "London",
            "province": "England",
            "country": "United Kingdom",
            "zip": "N1 9GU",
            "phone": "+44 20 7946 0000",
        },
        "line_items": [
            {"id": 1, "sku": "A1", "quantity": 2, "title": "Giclee Print"},
            {"id": 2, "sku": "B7", "quantity": 1, "title": "Canvas Wrap"},
        ],
    }


@pytest.fixture
def sample_finerworks_product() -> dict:
    """Sample FinerWorks product record."""
    return {
        "name": "Starry Harbor",
        "description": "<p>Archival giclee print</p>",
        "variants": [
            {"sku": "SH-8X10", "price": "24.00", "option1": "8x10", "option2": "Matte"},
            {"sku": "SH-16X20", "price": "58.00", "option1": "16x20", "option2": "Matte", "option3": "Framed"},
        ],
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport that records every request and answers from a route table."""

    def __init__(self, routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] | None = None) -> None:
        self.routes = routes or {}
        self.requests: list[httpx.Request] = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"errors": "Not Found"})
        return handler(request)

    def calls_to(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]


def request_json(request: httpx.Request):
    """Decode the JSON body of a recorded request."""
    return json.loads(request.content)


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()
