"""
Output models: the draft order payload sent to Shopify and the envelope
returned to the caller.
"""

from typing import Annotated, Any, Dict, List, Literal

from pydantic import BaseModel, Field


class DraftOrderLineItem(BaseModel):
    """Line item in the shape the Shopify Admin API expects."""

    title: Annotated[Any, Field(
        description='Line item title',
        examples=['Custom Item']
    )]

    quantity: Annotated[Any, Field(
        description='Quantity ordered',
        examples=[1]
    )]

    sku: Annotated[Any, Field(
        default=None,
        description='SKU, omitted from the payload when absent'
    )] = None

    price: Annotated[str, Field(
        description='Unit price as a decimal string with two fraction digits',
        pattern=r'^-?\d+\.\d{2}$',
        examples=['1299.00']
    )]

    taxable: Annotated[Literal[False], Field(
        default=False,
        description='Custom priced items are never taxable'
    )] = False

    properties: Annotated[List[Any], Field(
        default_factory=list,
        description='Custom properties shown on the order'
    )]


class DraftOrder(BaseModel):
    """The ``draft_order`` object of the create request."""

    line_items: List[DraftOrderLineItem]
    note: Any
    use_customer_default_address: Literal[True] = True


class DraftOrderPayload(BaseModel):
    """Body of ``POST /admin/api/{version}/draft_orders.json``."""

    draft_order: DraftOrder

    def to_request_body(self) -> Dict[str, Any]:
        body = self.model_dump(mode='json')
        for line_item in body['draft_order']['line_items']:
            if line_item.get('sku') is None:
                line_item.pop('sku', None)
        return body


class DraftOrderCreatedOutput(BaseModel):
    """Success envelope."""

    ok: Literal[True] = True

    invoice_url: Annotated[Any, Field(
        default=None,
        description='Invoice URL of the created draft order',
        examples=['https://my-store.myshopify.com/12345/invoices/abcdef']
    )] = None
