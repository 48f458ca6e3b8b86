"""
Business Logic Layer for draft order creation.

Transforms the caller's line items into the Shopify draft order payload,
hands it to the upstream handler and translates the outcome into the
response envelope.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, List, Mapping, Optional

from aws_lambda_powertools.metrics import MetricUnit

from draft_orders.dal import DraftOrderGateway
from draft_orders.handlers.models.env_vars import DEFAULT_DRAFT_ORDER_NOTE
from draft_orders.handlers.utils.errors import ClientInputError, UpstreamError
from draft_orders.handlers.utils.observability import logger, metrics, tracer
from draft_orders.models.input import CreateDraftOrderRequest, LineItemInput
from draft_orders.models.output import (
    DraftOrder,
    DraftOrderCreatedOutput,
    DraftOrderLineItem,
    DraftOrderPayload,
)

DEFAULT_LINE_ITEM_TITLE = 'Custom Item'
DEFAULT_QUANTITY = 1


def _finite_number(value: Any) -> Optional[float]:
    """Return ``value`` as a float when it is a finite JSON number, else None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def format_price_cents(price_cents: Any) -> str:
    """
    Convert a price in cents to a decimal string with two fraction digits.

    Anything that is not a finite number is priced at zero.

    Args:
        price_cents: Caller-supplied price in cents

    Returns:
        Price string such as "12.99"
    """
    cents = _finite_number(price_cents)
    if cents is None or cents == 0:
        # also folds -0.0 into "0.00"
        return '0.00'
    with localcontext() as ctx:
        # exact binary value of the float, ties away from zero
        ctx.rounding = ROUND_HALF_UP
        return format(Decimal(cents / 100), '.2f')


def transform_line_item(line_item: LineItemInput) -> DraftOrderLineItem:
    """Map one caller line item onto the Shopify line item shape."""
    properties = line_item.properties
    return DraftOrderLineItem(
        title=line_item.title or DEFAULT_LINE_ITEM_TITLE,
        quantity=line_item.quantity or DEFAULT_QUANTITY,
        sku=line_item.sku or None,
        price=format_price_cents(line_item.price_cents),
        taxable=False,
        properties=list(properties) if isinstance(properties, list) else [],
    )


@tracer.capture_method
def build_draft_order(body: Any, default_note: str = DEFAULT_DRAFT_ORDER_NOTE) -> DraftOrderPayload:
    """
    Build the Shopify draft order payload from a parsed request body.

    The body is never mutated and every line item is kept, in order.

    Args:
        body: Parsed JSON request body
        default_note: Note used when the caller sends none

    Returns:
        Draft order payload ready to be sent upstream

    Raises:
        ClientInputError: If line_items is missing, not a list or empty,
            or one of its entries is not an object
    """
    request = CreateDraftOrderRequest.model_validate(body if isinstance(body, Mapping) else {})

    raw_line_items = request.line_items
    if not isinstance(raw_line_items, list) or not raw_line_items:
        raise ClientInputError('No line_items')

    line_items: List[DraftOrderLineItem] = []
    for index, raw_line_item in enumerate(raw_line_items):
        if not isinstance(raw_line_item, Mapping):
            raise ClientInputError(f'Invalid line_item at index {index}')
        line_items.append(transform_line_item(LineItemInput.model_validate(raw_line_item)))

    return DraftOrderPayload(
        draft_order=DraftOrder(
            line_items=line_items,
            note=request.note or default_note,
            use_customer_default_address=True,
        )
    )


class DraftOrderService:
    """Business logic service creating draft orders."""

    def __init__(self, gateway: DraftOrderGateway, default_note: str = DEFAULT_DRAFT_ORDER_NOTE):
        """
        Initialize draft order service.

        Args:
            gateway: Upstream handler that creates the draft order
            default_note: Note used when the caller sends none
        """
        self.gateway = gateway
        self.default_note = default_note

    @tracer.capture_method
    async def create_draft_order(self, body: Any) -> DraftOrderCreatedOutput:
        """
        Create a draft order for the given request body.

        Args:
            body: Parsed JSON request body

        Returns:
            Success envelope carrying the invoice URL

        Raises:
            ClientInputError: If the body carries no usable line items
            UpstreamError: If Shopify rejects the request or answers unexpectedly
        """
        payload = build_draft_order(body, default_note=self.default_note)

        line_item_count = len(payload.draft_order.line_items)
        tracer.put_annotation('line_item_count', line_item_count)
        logger.info('Draft order payload built', extra={'line_item_count': line_item_count})

        try:
            draft_order = await self.gateway.create_draft_order(payload)
        except UpstreamError as e:
            metrics.add_metric(name='UpstreamFailure', unit=MetricUnit.Count, value=1)
            tracer.put_annotation('upstream_failure_reason', e.reason.value)
            raise

        metrics.add_metric(name='DraftOrderCreated', unit=MetricUnit.Count, value=1)
        logger.info('Draft order created', extra={'draft_order_id': draft_order.get('id')})

        return DraftOrderCreatedOutput(invoice_url=draft_order.get('invoice_url'))
