"""
Environment variable models for type-safe configuration.

The adapter reads its configuration once per process through
``aws_lambda_env_modeler`` and passes the resulting frozen model to the
handler, so tests can build one directly instead of mutating ``os.environ``.
"""

from typing import Annotated, List, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, ConfigDict, Field, SecretStr

from draft_orders.handlers.utils.cors import parse_allowed_origins

DEFAULT_API_VERSION = '2024-04'
DEFAULT_DRAFT_ORDER_NOTE = 'Configurator Draft Order'


class DraftOrderEnvVars(BaseModel):
    """Environment variables for the draft order handler."""

    model_config = ConfigDict(frozen=True)

    # Store domain, e.g. "my-store.myshopify.com"; checked per request, not at load
    SHOPIFY_STORE: Annotated[Optional[str], Field(
        default=None,
        description='Shopify store domain receiving the draft orders'
    )] = None

    SHOPIFY_ADMIN_TOKEN: Annotated[Optional[SecretStr], Field(
        default=None,
        description='Shopify Admin API access token'
    )] = None

    SHOPIFY_API_VERSION: Annotated[str, Field(
        default=DEFAULT_API_VERSION,
        description='Shopify Admin API version used in the request path',
        pattern=r'^\d{4}-\d{2}$|^unstable$'
    )] = DEFAULT_API_VERSION

    SHOPIFY_TIMEOUT_SECONDS: Annotated[Optional[float], Field(
        default=None,
        description='Optional upper bound for the Shopify call; unset means no timeout',
        gt=0
    )] = None

    # Comma-separated CORS allow-list; empty means "*"
    ALLOWED_ORIGINS: Annotated[str, Field(
        default='',
        description='Comma-separated list of origins allowed to call the adapter'
    )] = ''

    DEFAULT_DRAFT_ORDER_NOTE: Annotated[str, Field(
        default=DEFAULT_DRAFT_ORDER_NOTE,
        description='Note attached to draft orders when the caller sends none'
    )] = DEFAULT_DRAFT_ORDER_NOTE

    @property
    def is_configured(self) -> bool:
        """Check that both the store domain and the admin token are present."""
        return bool(self.SHOPIFY_STORE) and bool(
            self.SHOPIFY_ADMIN_TOKEN and self.SHOPIFY_ADMIN_TOKEN.get_secret_value()
        )

    @property
    def allowed_origins(self) -> List[str]:
        """Allow-list entries, trimmed, with empty entries removed."""
        return parse_allowed_origins(self.ALLOWED_ORIGINS)

    @property
    def draft_orders_url(self) -> str:
        """Admin API endpoint creating draft orders."""
        return f'https://{self.SHOPIFY_STORE}/admin/api/{self.SHOPIFY_API_VERSION}/draft_orders.json'


def get_handler_env_vars() -> DraftOrderEnvVars:
    """
    Get typed environment variables for the handler.

    ``get_environment_variables`` caches the parsed model, so the environment
    is read once per process.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=DraftOrderEnvVars)
