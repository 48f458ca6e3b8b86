"""
Input models for the draft order request body.

Callers are browser configurators that send loosely typed JSON, so the
line item model accepts any value per field and leaves the defaulting rules
to the payload transformer.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field


class LineItemInput(BaseModel):
    """One caller-supplied line item with a custom price in cents."""

    model_config = ConfigDict(extra='ignore', frozen=True)

    title: Annotated[Any, Field(
        default=None,
        description='Line item title; falsy values fall back to "Custom Item"',
        examples=['Custom Table 180x90']
    )] = None

    quantity: Annotated[Any, Field(
        default=None,
        description='Quantity; falsy values fall back to 1',
        examples=[1, 2]
    )] = None

    sku: Annotated[Any, Field(
        default=None,
        description='Optional SKU, omitted upstream when falsy',
        examples=['TBL-OAK-180']
    )] = None

    price_cents: Annotated[Any, Field(
        default=None,
        description='Unit price in integer cents; non-numbers count as 0',
        examples=[129900]
    )] = None

    properties: Annotated[Any, Field(
        default=None,
        description='List of {name, value} pairs passed through to Shopify',
        examples=[[{'name': 'Wood', 'value': 'Oak'}]]
    )] = None


class CreateDraftOrderRequest(BaseModel):
    """Request body accepted by the adapter."""

    model_config = ConfigDict(extra='ignore', frozen=True)

    line_items: Annotated[Any, Field(
        default=None,
        description='Non-empty list of line items'
    )] = None

    note: Annotated[Any, Field(
        default=None,
        description='Optional note stored on the draft order'
    )] = None
