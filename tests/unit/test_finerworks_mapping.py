"""Unit tests for the Shopify -> FinerWorks mapping module."""

import pytest
from pydantic import ValidationError

from fulfillment_bridge.integrations.finerworks.mapping import (
    build_finerworks_order,
    build_product_details_request,
    order_skus,
)
from fulfillment_bridge.models import ShopifyOrder


class TestBuildFinerWorksOrder:
    """Tests for build_finerworks_order."""

    def test_order_shape(self, sample_shopify_order):
        order = ShopifyOrder.model_validate(sample_shopify_order)
        body = build_finerworks_order(order)

        assert body["orderNumber"] == 1001
        assert body["items"] == [
            {"sku": "A1", "quantity": 2},
            {"sku": "B7", "quantity": 1},
        ]

    def test_shipping_address_is_verbatim(self, sample_shopify_order):
        order = ShopifyOrder.model_validate(sample_shopify_order)
        body = build_finerworks_order(order)

        assert body["shippingAddress"] == sample_shopify_order["shipping_address"]

    def test_item_count_preserved(self):
        order = ShopifyOrder.model_validate(
            {
                "id": "gid-7",
                "line_items": [{"sku": f"S{i}", "quantity": i} for i in range(1, 6)],
            }
        )
        items = build_finerworks_order(order)["items"]

        assert len(items) == 5
        assert [i["quantity"] for i in items] == [1, 2, 3, 4, 5]

    def test_missing_shipping_address(self):
        order = ShopifyOrder.model_validate({"id": 5, "line_items": []})
        assert build_finerworks_order(order) == {
            "orderNumber": 5,
            "shippingAddress": None,
            "items": [],
        }

    def test_malformed_line_item_raises(self):
        with pytest.raises(ValidationError):
            ShopifyOrder.model_validate({"id": 5, "line_items": [{"sku": "A1"}]})


class TestProductDetailsRequest:
    """Tests for the product detail lookup body."""

    def test_order_skus(self, sample_shopify_order):
        order = ShopifyOrder.model_validate(sample_shopify_order)
        assert order_skus(order) == ["A1", "B7"]

    def test_details_request(self):
        assert build_product_details_request(["A1", "B7"]) == [
            {"product_order_po": None, "product_qty": 1, "product_sku": "A1"},
            {"product_order_po": None, "product_qty": 1, "product_sku": "B7"},
        ]
