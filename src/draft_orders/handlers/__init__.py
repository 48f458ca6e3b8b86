"""
AWS Lambda Handlers Module.

Entry points of the draft order adapter. The handler layer owns request and
response handling (CORS, method gate, configuration check, envelopes); the
logic layer transforms the cart and the data access layer talks to Shopify.
"""

# Re-export handler utilities for convenience
from draft_orders.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
