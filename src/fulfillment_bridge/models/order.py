"""Shopify order models received through the orders/create webhook."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ShopifyLineItem(BaseModel):
    """A single order line: the SKU shared with FinerWorks and its quantity."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    sku: str | None = Field(default=None, description="Variant SKU")
    quantity: int = Field(..., description="Units ordered")


class ShopifyOrder(BaseModel):
    """
    Order as delivered by the Shopify ``orders/create`` webhook.

    The shipping address is owned entirely by Shopify and is kept as the raw
    mapping so it can be forwarded without reshaping.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int | str = Field(..., description="Shopify order ID")
    shipping_address: dict[str, Any] | None = Field(
        default=None,
        description="Shipping address exactly as sent by Shopify",
    )
    line_items: list[ShopifyLineItem] = Field(default_factory=list)
