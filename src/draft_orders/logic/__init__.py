"""
Business Logic Layer for draft order creation.
"""

from draft_orders.logic.draft_order_service import (
    DraftOrderService,
    build_draft_order,
    format_price_cents,
    transform_line_item,
)

__all__ = [
    "DraftOrderService",
    "build_draft_order",
    "format_price_cents",
    "transform_line_item",
]
