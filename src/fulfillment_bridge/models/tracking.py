"""Tracking updates posted by FinerWorks."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TrackingUpdate(BaseModel):
    """Shipment notification for a Shopify order fulfilled by FinerWorks."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    order_number: int | str = Field(..., alias="orderNumber")
    tracking_number: str | None = Field(default=None, alias="trackingNumber")
    carrier: str | None = None

    @field_validator("order_number")
    @classmethod
    def order_number_is_numeric(cls, value: int | str) -> int | str:
        # Interpolated into the Shopify URL path
        text = str(value)
        if not (text.isascii() and text.isdigit()):
            raise ValueError("orderNumber must be a numeric Shopify order ID")
        return value
