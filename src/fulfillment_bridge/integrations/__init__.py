"""Platform integrations for Shopify and FinerWorks."""

from fulfillment_bridge.integrations.base import JsonApiClient
from fulfillment_bridge.integrations.finerworks import FinerWorksClient
from fulfillment_bridge.integrations.shopify import ShopifyClient, ShopifyWebhookVerifier

__all__ = [
    # Base
    "JsonApiClient",
    # Shopify
    "ShopifyClient",
    "ShopifyWebhookVerifier",
    # FinerWorks
    "FinerWorksClient",
]
