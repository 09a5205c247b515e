"""Shopify Admin REST API client (write side used by the bridge)."""

from typing import Any

import httpx

from fulfillment_bridge.integrations.base import JsonApiClient


class ShopifyClient(JsonApiClient):
    """
    Shopify Admin API client.

    Authenticates with the static ``X-Shopify-Access-Token`` header.
    """

    service_name = "shopify"

    def __init__(
        self,
        store_domain: str,
        access_token: str,
        api_version: str = "2025-01",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the Shopify client.

        Args:
            store_domain: The Shopify store domain (e.g., "my-store.myshopify.com").
            access_token: Shopify Admin API access token.
            api_version: Admin API version segment.
            timeout: Request timeout in seconds.
            transport: Optional transport override (used by tests).
        """
        self.store_domain = store_domain.rstrip("/")
        self.api_version = api_version
        super().__init__(
            base_url=f"https://{self.store_domain}/admin/api/{api_version}",
            headers={"X-Shopify-Access-Token": access_token},
            timeout=timeout,
            transport=transport,
        )

    async def create_product(self, product: dict[str, Any]) -> Any:
        """Create a product (with its variants) from a ``{"product": ...}`` body."""
        return await self.request_json("POST", "/products.json", json=product)

    async def create_fulfillment(self, order_id: int | str, fulfillment: dict[str, Any]) -> Any:
        """Create a fulfillment on an order from a ``{"fulfillment": ...}`` body."""
        return await self.request_json(
            "POST",
            f"/orders/{order_id}/fulfillments.json",
            json=fulfillment,
        )
