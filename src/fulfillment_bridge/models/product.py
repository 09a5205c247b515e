"""FinerWorks product models pulled during product sync."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FinerWorksVariant(BaseModel):
    """
    A purchasable variant with up to three option labels.

    Values are forwarded to Shopify as FinerWorks sent them, so numeric SKUs
    or option labels are not coerced or rejected.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    sku: Any = None
    price: Any = None
    option1: Any = None
    option2: Any = None
    option3: Any = None


class FinerWorksProduct(BaseModel):
    """Product record as listed by the FinerWorks products endpoint."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: Any = Field(default=None, description="Product title")
    description: Any = Field(default=None, description="HTML description")
    variants: list[FinerWorksVariant] = Field(default_factory=list)
