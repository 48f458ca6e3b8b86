"""
Unit tests for Pydantic models.

This module tests the validation and serialization of the request,
payload and response models.
"""

import pytest
from pydantic import ValidationError

from draft_orders.models.input import CreateDraftOrderRequest, LineItemInput
from draft_orders.models.output import (
    DraftOrder,
    DraftOrderCreatedOutput,
    DraftOrderLineItem,
    DraftOrderPayload,
)


class TestLineItemInput:
    """Test cases for LineItemInput model."""

    def test_accepts_loosely_typed_values(self):
        line_item = LineItemInput.model_validate({"title": 5, "quantity": "2", "price_cents": "100"})

        assert line_item.title == 5
        assert line_item.quantity == "2"
        assert line_item.price_cents == "100"
        assert line_item.properties is None

    def test_ignores_unknown_fields(self):
        line_item = LineItemInput.model_validate({"taxable": True, "vendor": "ACME"})
        assert not hasattr(line_item, "taxable")

    def test_is_frozen(self):
        line_item = LineItemInput(title="Chair")
        with pytest.raises(ValidationError):
            line_item.title = "Table"


class TestCreateDraftOrderRequest:
    """Test cases for CreateDraftOrderRequest model."""

    def test_defaults(self):
        request = CreateDraftOrderRequest.model_validate({})
        assert request.line_items is None
        assert request.note is None


class TestDraftOrderLineItem:
    """Test cases for DraftOrderLineItem model."""

    def test_price_must_have_two_fraction_digits(self):
        with pytest.raises(ValidationError):
            DraftOrderLineItem(title="Chair", quantity=1, price="12.5")

    def test_taxable_is_always_false(self):
        with pytest.raises(ValidationError):
            DraftOrderLineItem(title="Chair", quantity=1, price="12.50", taxable=True)

    def test_defaults(self):
        line_item = DraftOrderLineItem(title="Chair", quantity=1, price="12.50")
        assert line_item.taxable is False
        assert line_item.properties == []
        assert line_item.sku is None


class TestDraftOrderPayload:
    """Test cases for DraftOrderPayload serialization."""

    def test_request_body_omits_missing_sku(self):
        payload = DraftOrderPayload(draft_order=DraftOrder(
            line_items=[
                DraftOrderLineItem(title="Chair", quantity=1, price="12.50"),
                DraftOrderLineItem(title="Table", quantity=1, price="99.00", sku="TBL-1"),
            ],
            note="Configurator Draft Order",
        ))

        body = payload.to_request_body()

        assert "sku" not in body["draft_order"]["line_items"][0]
        assert body["draft_order"]["line_items"][1]["sku"] == "TBL-1"
        assert body["draft_order"]["use_customer_default_address"] is True


class TestDraftOrderCreatedOutput:
    """Test cases for the success envelope."""

    def test_serialization(self):
        output = DraftOrderCreatedOutput(invoice_url="https://invoice")
        assert output.model_dump(mode="json") == {"ok": True, "invoice_url": "https://invoice"}
