"""Per-request data models exchanged with Shopify and FinerWorks."""

from fulfillment_bridge.models.order import ShopifyLineItem, ShopifyOrder
from fulfillment_bridge.models.product import FinerWorksProduct, FinerWorksVariant
from fulfillment_bridge.models.tracking import TrackingUpdate

__all__ = [
    "FinerWorksProduct",
    "FinerWorksVariant",
    "ShopifyLineItem",
    "ShopifyOrder",
    "TrackingUpdate",
]
