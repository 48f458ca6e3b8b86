"""
Data Access Layer for the draft order adapter.

The only external system is the Shopify Admin API; the gateway interface
keeps the business logic independent of the HTTP client behind it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from draft_orders.models.output import DraftOrderPayload


class DraftOrderGateway(ABC):
    """Abstract base class for upstream draft order creation."""

    @abstractmethod
    async def create_draft_order(self, payload: DraftOrderPayload) -> Dict[str, Any]:
        """Create a draft order upstream and return the ``draft_order`` object."""
        pass


__all__ = [
    "DraftOrderGateway",
]
