"""
Shopify Admin API implementation of the draft order gateway.

Issues exactly one ``POST /admin/api/{version}/draft_orders.json`` per call.
There is no retry; a failed call fails the invocation.
"""

import json
from typing import Any, Dict, Optional

import httpx

from draft_orders.dal import DraftOrderGateway
from draft_orders.handlers.utils.errors import UpstreamError, UpstreamFailureReason
from draft_orders.handlers.utils.observability import logger, tracer
from draft_orders.models.output import DraftOrderPayload

ACCESS_TOKEN_HEADER = 'X-Shopify-Access-Token'


class ShopifyDraftOrderHandler(DraftOrderGateway):
    """Creates draft orders through the Shopify Admin REST API."""

    def __init__(
        self,
        url: str,
        access_token: str,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize the Shopify handler.

        Args:
            url: Full draft_orders.json endpoint of the store
            access_token: Admin API access token
            timeout_seconds: Optional bound for the call; None disables the timeout
            transport: Optional httpx transport, used by tests
        """
        self.url = url
        self._headers = {
            'Content-Type': 'application/json',
            ACCESS_TOKEN_HEADER: access_token,
        }
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return response.text

    @tracer.capture_method
    async def create_draft_order(self, payload: DraftOrderPayload) -> Dict[str, Any]:
        """
        Create a draft order in Shopify.

        Args:
            payload: Draft order payload

        Returns:
            The ``draft_order`` object of the Shopify response

        Raises:
            UpstreamError: If Shopify answers with a non-2xx status, the body
                lacks ``draft_order``, or the optional timeout expires
        """
        async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
            try:
                response = await client.post(self.url, headers=self._headers, json=payload.to_request_body())
            except httpx.TimeoutException as e:
                logger.error('Shopify request timed out', extra={
                    'url': self.url,
                    'timeout_seconds': self.timeout_seconds,
                    'error': str(e),
                })
                raise UpstreamError(
                    reason=UpstreamFailureReason.TIMEOUT,
                    message='Shopify request timed out',
                    has_details=False,
                ) from e

        data = self._parse_body(response)

        if not response.is_success:
            logger.error('Shopify rejected draft order', extra={
                'url': self.url,
                'status_code': response.status_code,
            })
            raise UpstreamError(
                reason=UpstreamFailureReason.REJECTED,
                status_code=response.status_code,
                details=data,
            )

        draft_order = data.get('draft_order') if isinstance(data, dict) else None
        if not draft_order or not isinstance(draft_order, dict):
            logger.error('Shopify response has no draft_order', extra={
                'url': self.url,
                'status_code': response.status_code,
            })
            raise UpstreamError(
                reason=UpstreamFailureReason.MALFORMED,
                status_code=response.status_code,
                details=data,
            )

        tracer.put_annotation('draft_order_id', str(draft_order.get('id')))
        logger.debug('Shopify draft order response parsed', extra={'status_code': response.status_code})
        return draft_order
