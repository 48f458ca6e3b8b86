"""
Create Draft Order Handler - Lambda function turning a configurator cart into
a Shopify draft order.

Every invocation runs the same linear pipeline: gate the request (preflight,
method, configuration), transform the line items, make the single upstream
call, and translate the outcome into the ``{ok, ...}`` envelope. The CORS
headers are computed once per invocation and attached to every response.
"""

import asyncio
import json
import os
from typing import Any, Dict, Mapping, Optional

import httpx
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from draft_orders.dal.shopify_handler import ShopifyDraftOrderHandler
from draft_orders.handlers.models.env_vars import DraftOrderEnvVars, get_handler_env_vars
from draft_orders.handlers.utils.cors import CorsPolicy
from draft_orders.handlers.utils.errors import (
    BaseServiceError,
    ConfigurationError,
    MethodNotAllowedError,
    format_error_response,
    get_http_status_code,
    log_error_metrics,
)
from draft_orders.handlers.utils.observability import logger, metrics, tracer
from draft_orders.handlers.utils.responses import create_api_response
from draft_orders.logic.draft_order_service import DraftOrderService

PREFLIGHT_METHOD = 'OPTIONS'
CREATE_METHOD = 'POST'
INVALID_CONFIGURATION_MESSAGE = 'Invalid SHOPIFY_* configuration'


def get_header(headers: Optional[Mapping[str, str]], name: str) -> str:
    """Case-insensitive header lookup; API Gateway keeps the caller's casing."""
    if not headers:
        return ''
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value or ''
    return ''


class DraftOrderAdapter:
    """Request handler bound to one immutable configuration."""

    def __init__(
        self,
        env_vars: DraftOrderEnvVars,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        configuration_error: Optional[str] = None,
    ) -> None:
        """
        Initialize the adapter.

        Args:
            env_vars: Process-wide configuration
            transport: Optional httpx transport for the Shopify call, used by tests
            configuration_error: Set when the environment failed validation;
                every POST then fails with this message
        """
        self.env_vars = env_vars
        self.cors_policy = CorsPolicy(env_vars.allowed_origins)
        self._transport = transport
        self.configuration_error = configuration_error

    def _build_service(self) -> DraftOrderService:
        if self.configuration_error:
            raise ConfigurationError(self.configuration_error)
        if not self.env_vars.is_configured:
            raise ConfigurationError()

        gateway = ShopifyDraftOrderHandler(
            url=self.env_vars.draft_orders_url,
            access_token=self.env_vars.SHOPIFY_ADMIN_TOKEN.get_secret_value(),
            timeout_seconds=self.env_vars.SHOPIFY_TIMEOUT_SECONDS,
            transport=self._transport,
        )
        return DraftOrderService(gateway=gateway, default_note=self.env_vars.DEFAULT_DRAFT_ORDER_NOTE)

    @tracer.capture_method
    def handle(self, event: APIGatewayProxyEvent, request_id: str = '') -> Dict[str, Any]:
        """
        Process one API Gateway proxy event.

        Args:
            event: Incoming API Gateway event
            request_id: Lambda request id echoed in X-Request-ID

        Returns:
            API Gateway proxy response
        """
        origin = get_header(event.get('headers'), 'origin')
        headers = self.cors_policy.headers(origin)
        if request_id:
            headers['X-Request-ID'] = request_id

        http_method = (event.get('httpMethod') or '').upper()
        tracer.put_annotation('http_method', http_method)

        if http_method == PREFLIGHT_METHOD:
            metrics.add_metric(name='PreflightCount', unit=MetricUnit.Count, value=1)
            logger.debug('Preflight request answered', extra={'origin': origin})
            return create_api_response(status_code=204, body='', headers=headers)

        try:
            if http_method != CREATE_METHOD:
                raise MethodNotAllowedError(method=http_method)

            service = self._build_service()

            raw_body = event.decoded_body if event.get('body') else None
            body = json.loads(raw_body or '{}')
            result = asyncio.run(service.create_draft_order(body))

            logger.info('Draft order request completed', extra={'origin': origin})
            return create_api_response(
                status_code=200,
                body=result.model_dump(mode='json'),
                headers=headers,
            )

        except BaseServiceError as e:
            log_error_metrics(e)
            return create_api_response(
                status_code=get_http_status_code(e),
                body=format_error_response(e),
                headers=headers,
            )

        except Exception as e:
            logger.exception('Unexpected error in handler', extra={'error': str(e)})
            metrics.add_metric(name='UnexpectedError', unit=MetricUnit.Count, value=1)
            return create_api_response(
                status_code=500,
                body={'ok': False, 'error': str(e)},
                headers=headers,
            )


_adapter: Optional[DraftOrderAdapter] = None


def get_adapter() -> DraftOrderAdapter:
    """Get or create the process-wide adapter from the environment."""
    global _adapter

    if _adapter is None:
        try:
            _adapter = DraftOrderAdapter(env_vars=get_handler_env_vars())
        except ValidationError as e:
            logger.exception('Invalid adapter configuration', extra={'error_count': e.error_count()})
            # keep the CORS allow-list so preflight still answers
            _adapter = DraftOrderAdapter(
                env_vars=DraftOrderEnvVars(ALLOWED_ORIGINS=os.environ.get('ALLOWED_ORIGINS', '')),
                configuration_error=INVALID_CONFIGURATION_MESSAGE,
            )

    return _adapter


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: API Gateway REST proxy event
        context: Lambda context object

    Returns:
        API Gateway response
    """
    metrics.add_metric(name='RequestCount', unit=MetricUnit.Count, value=1)
    return get_adapter().handle(event, request_id=context.aws_request_id)
