"""Translation of Shopify orders into FinerWorks API request bodies."""

from typing import Any

from fulfillment_bridge.models.order import ShopifyOrder


def order_skus(order: ShopifyOrder) -> list[str | None]:
    """Return the SKU of every line item, in order."""
    return [item.sku for item in order.line_items]


def build_finerworks_order(order: ShopifyOrder) -> dict[str, Any]:
    """
    Build the body for ``POST /orders`` from a Shopify order.

    The shipping address is forwarded exactly as Shopify sent it and each
    line item is reduced to its SKU and quantity.
    """
    return {
        "orderNumber": order.id,
        "shippingAddress": order.shipping_address,
        "items": [
            {"sku": item.sku, "quantity": item.quantity}
            for item in order.line_items
        ],
    }


def build_product_details_request(skus: list[str | None]) -> list[dict[str, Any]]:
    """Build the batch body for ``POST /get_product_details``."""
    return [
        {
            "product_order_po": None,
            "product_qty": 1,
            "product_sku": sku,
        }
        for sku in skus
    ]
