"""FinerWorks API client."""

from typing import Any

import httpx

from fulfillment_bridge.integrations.base import JsonApiClient
from fulfillment_bridge.integrations.finerworks.mapping import build_product_details_request


class FinerWorksClient(JsonApiClient):
    """
    FinerWorks REST API client.

    FinerWorks uses two credential schemes depending on the endpoint:
    - Bearer token (API key) for products and orders
    - Paired ``app_key`` / ``web_api_key`` headers for product details
    """

    service_name = "finerworks"

    def __init__(
        self,
        api_base: str,
        api_key: str,
        web_api_key: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the FinerWorks client.

        Args:
            api_base: API base URL (e.g., "https://api.finerworks.com/v3").
            api_key: FinerWorks API (app) key.
            web_api_key: FinerWorks web API key.
            timeout: Request timeout in seconds.
            transport: Optional transport override (used by tests).
        """
        self.api_key = api_key
        self.web_api_key = web_api_key
        super().__init__(base_url=api_base, timeout=timeout, transport=transport)

    @property
    def bearer_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    @property
    def key_pair_headers(self) -> dict[str, str]:
        return {"app_key": self.api_key, "web_api_key": self.web_api_key}

    async def list_products(self) -> list[dict[str, Any]]:
        """Fetch every product available to the account."""
        data = await self.request_json("GET", "/products", headers=self.bearer_headers)
        return data or []

    async def submit_order(self, order: dict[str, Any]) -> Any:
        """Submit an order for production and shipping."""
        return await self.request_json("POST", "/orders", json=order, headers=self.bearer_headers)

    async def get_product_details(self, skus: list[str]) -> Any:
        """Fetch product details for a batch of SKUs (one unit each, no PO reference)."""
        return await self.request_json(
            "POST",
            "/get_product_details",
            json=build_product_details_request(skus),
            headers=self.key_pair_headers,
        )
