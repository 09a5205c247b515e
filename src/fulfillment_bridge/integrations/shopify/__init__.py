"""Shopify integration: client, mapping, and webhook verification."""

from fulfillment_bridge.integrations.shopify.client import ShopifyClient
from fulfillment_bridge.integrations.shopify.webhooks import ShopifyWebhookVerifier

__all__ = ["ShopifyClient", "ShopifyWebhookVerifier"]
