"""
Draft Order Adapter service package.

A single Lambda function that turns a configurator cart (line items with
custom prices in cents) into a Shopify draft order and returns its invoice
URL. Layers:

- handlers: Lambda entry point, CORS, request gate, response envelopes
- logic: payload transformation and orchestration
- dal: Shopify Admin API access
- models: Pydantic request, payload and response models
"""

__version__ = "1.0.0"
__description__ = "Shopify draft order adapter for AWS Lambda"

from draft_orders.models.input import CreateDraftOrderRequest, LineItemInput
from draft_orders.models.output import DraftOrderCreatedOutput, DraftOrderPayload
from draft_orders.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "CreateDraftOrderRequest",
    "LineItemInput",
    "DraftOrderCreatedOutput",
    "DraftOrderPayload",
    "logger",
    "tracer",
    "metrics",
]
