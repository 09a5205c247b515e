"""Translation of FinerWorks records into Shopify Admin API request bodies."""

from typing import Any

from fulfillment_bridge.models.product import FinerWorksProduct, FinerWorksVariant
from fulfillment_bridge.models.tracking import TrackingUpdate

DEFAULT_VENDOR = "FinerWorks"
DEFAULT_CARRIER = "Other"

_OPTION_SLOTS = ("option1", "option2", "option3")


def map_variant(variant: FinerWorksVariant) -> dict[str, Any]:
    """Map a FinerWorks variant to a Shopify variant, keeping option slots positional."""
    result: dict[str, Any] = {"sku": variant.sku, "price": variant.price}
    for slot in _OPTION_SLOTS:
        # Absent options stay absent; explicit nulls are forwarded.
        if slot in variant.model_fields_set:
            result[slot] = getattr(variant, slot)
    return result


def build_shopify_product(
    product: FinerWorksProduct,
    vendor: str = DEFAULT_VENDOR,
) -> dict[str, Any]:
    """
    Build the body for ``POST /products.json`` from a FinerWorks product.

    Args:
        product: Product pulled from FinerWorks.
        vendor: Vendor tag applied to every synced product.

    Returns:
        ``{"product": {...}}`` with one Shopify variant per FinerWorks variant.
    """
    body: dict[str, Any] = {}
    if "name" in product.model_fields_set:
        body["title"] = product.name
    if "description" in product.model_fields_set:
        body["body_html"] = product.description
    body["vendor"] = vendor
    body["variants"] = [map_variant(v) for v in product.variants]
    return {"product": body}


def resolve_carrier(carrier: str | None) -> str:
    """Return the carrier name, or "Other" when FinerWorks did not send one."""
    return carrier if carrier is not None else DEFAULT_CARRIER


def build_shopify_fulfillment(
    update: TrackingUpdate,
    location_id: str,
) -> dict[str, Any]:
    """
    Build the body for ``POST /orders/{id}/fulfillments.json``.

    Args:
        update: Tracking update received from FinerWorks.
        location_id: Shopify location the fulfillment ships from.

    Returns:
        ``{"fulfillment": {...}}`` requesting customer notification.
    """
    return {
        "fulfillment": {
            "location_id": location_id,
            "tracking_number": update.tracking_number,
            "tracking_company": resolve_carrier(update.carrier),
            "notify_customer": True,
        }
    }
