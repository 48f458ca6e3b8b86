"""
Service Models Package

Pydantic models for the adapter's request body, the Shopify draft order
payload and the response envelope.
"""

from .input import CreateDraftOrderRequest, LineItemInput
from .output import DraftOrder, DraftOrderCreatedOutput, DraftOrderLineItem, DraftOrderPayload

__all__ = [
    # Input models
    "CreateDraftOrderRequest",
    "LineItemInput",

    # Output models
    "DraftOrder",
    "DraftOrderCreatedOutput",
    "DraftOrderLineItem",
    "DraftOrderPayload",
]
