"""
Sync service: composes verification, translation and outbound calls.

Every operation is request-scoped. The service holds only configuration and
the API clients; translators are pure functions called between client calls.
"""

import json
import logging
from typing import Any

from fulfillment_bridge.config import Settings
from fulfillment_bridge.exceptions import PayloadError, UpstreamError, WebhookVerificationError
from fulfillment_bridge.integrations.finerworks.client import FinerWorksClient
from fulfillment_bridge.integrations.finerworks.mapping import build_finerworks_order, order_skus
from fulfillment_bridge.integrations.shopify.client import ShopifyClient
from fulfillment_bridge.integrations.shopify.mapping import (
    build_shopify_fulfillment,
    build_shopify_product,
)
from fulfillment_bridge.integrations.shopify.webhooks import ShopifyWebhookVerifier
from fulfillment_bridge.models import FinerWorksProduct, ShopifyOrder, TrackingUpdate
from fulfillment_bridge.observability.metrics import record_product_synced, record_webhook

logger = logging.getLogger(__name__)


def _parse(model: type, raw_body: bytes, source: str) -> Any:
    try:
        return model.model_validate(json.loads(raw_body))
    except ValueError as e:
        # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
        raise PayloadError(f"Malformed {source} payload", detail=str(e)) from e


class SyncService:
    """Orchestrates the three Shopify <-> FinerWorks sync flows."""

    def __init__(
        self,
        settings: Settings,
        shopify: ShopifyClient,
        finerworks: FinerWorksClient,
        verifier: ShopifyWebhookVerifier | None = None,
    ) -> None:
        self.settings = settings
        self.shopify = shopify
        self.finerworks = finerworks
        self.verifier = verifier or ShopifyWebhookVerifier(settings.shopify_webhook_secret)

    @classmethod
    def from_settings(cls, settings: Settings, transport: Any = None) -> "SyncService":
        """Build the service and its clients from settings."""
        return cls(
            settings=settings,
            shopify=ShopifyClient(
                store_domain=settings.shopify_store_domain,
                access_token=settings.shopify_access_token,
                api_version=settings.shopify_api_version,
                timeout=settings.http_timeout,
                transport=transport,
            ),
            finerworks=FinerWorksClient(
                api_base=settings.finerworks_api_base,
                api_key=settings.finerworks_api_key,
                web_api_key=settings.finerworks_web_api_key,
                timeout=settings.http_timeout,
                transport=transport,
            ),
        )

    async def close(self) -> None:
        """Close both API clients."""
        await self.shopify.close()
        await self.finerworks.close()

    async def sync_products(self) -> int:
        """
        Push every FinerWorks product into Shopify as a new product.

        Stops at the first failure; products created before it are kept.

        Returns:
            Number of products created in Shopify.

        Raises:
            UpstreamError: If either API call fails.
            PayloadError: If FinerWorks returns a product that cannot be parsed.
        """
        records = await self.finerworks.list_products()
        synced = 0
        for record in records:
            try:
                product = FinerWorksProduct.model_validate(record)
            except ValueError as e:
                raise PayloadError("Malformed FinerWorks product", detail=str(e)) from e

            result = await self.shopify.create_product(
                build_shopify_product(product, vendor=self.settings.vendor_name)
            )
            synced += 1
            record_product_synced()
            logger.info(f"Synced product {product.name}", extra={"shopify_response": result})
        return synced

    async def handle_order_created(self, raw_body: bytes, signature: str | None) -> Any:
        """
        Forward a Shopify ``orders/create`` webhook to FinerWorks.

        Args:
            raw_body: Request body exactly as received.
            signature: X-Shopify-Hmac-Sha256 header value.

        Returns:
            The FinerWorks order submission response.

        Raises:
            WebhookVerificationError: If the signature does not match; nothing
                is sent upstream in that case.
            PayloadError: If the body is not a valid order.
            UpstreamError: If the order submission fails.
        """
        if not self.verifier.verify_signature(raw_body, signature):
            logger.error("Invalid Shopify HMAC")
            record_webhook("shopify", "rejected")
            raise WebhookVerificationError()

        try:
            order = _parse(ShopifyOrder, raw_body, "Shopify order")
            logger.info(f"New order from Shopify: {order.id}")

            skus = order_skus(order)
            try:
                details = await self.finerworks.get_product_details(skus)
                logger.info("Product details from FinerWorks", extra={"product_details": details})
            except UpstreamError as e:
                logger.warning(f"Product detail lookup failed for order {order.id}: {e.message}")

            result = await self.finerworks.submit_order(build_finerworks_order(order))
        except (PayloadError, UpstreamError):
            record_webhook("shopify", "failed")
            raise

        logger.info(f"Sent order {order.id} to FinerWorks", extra={"finerworks_response": result})
        record_webhook("shopify", "accepted")
        return result

    async def handle_tracking_update(self, raw_body: bytes) -> Any:
        """
        Create a Shopify fulfillment from a FinerWorks tracking update.

        Returns:
            The Shopify fulfillment response.

        Raises:
            PayloadError: If the body is not a valid tracking update.
            UpstreamError: If the fulfillment call fails.
        """
        try:
            update = _parse(TrackingUpdate, raw_body, "FinerWorks update")
            logger.info(
                f"Update from FinerWorks for order {update.order_number}",
                extra={"tracking_number": update.tracking_number, "carrier": update.carrier},
            )
            result = await self.shopify.create_fulfillment(
                update.order_number,
                build_shopify_fulfillment(update, self.settings.shopify_location_id),
            )
        except (PayloadError, UpstreamError):
            record_webhook("finerworks", "failed")
            raise

        logger.info(
            f"Updated Shopify order {update.order_number}",
            extra={"shopify_response": result},
        )
        record_webhook("finerworks", "accepted")
        return result

    async def test_finerworks(self) -> Any:
        """Fetch product details for the configured diagnostic SKU."""
        return await self.finerworks.get_product_details([self.settings.finerworks_test_sku])
