"""
Pytest configuration and shared fixtures for the draft order adapter.

This module provides common test fixtures and configuration used across
unit, integration, and end-to-end tests.
"""

import json
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

import httpx
import pytest

# Powertools reads these when the observability module is first imported,
# which happens while test modules are collected.
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from draft_orders.handlers.models.env_vars import DraftOrderEnvVars  # noqa: E402

TEST_STORE = "test-store.myshopify.com"
TEST_TOKEN = "shpat_test_token"
INVOICE_URL = "https://test-store.myshopify.com/1234/invoices/abcdef"


@dataclass
class LambdaContext:
    """Minimal Lambda context accepted by the Powertools decorators."""

    function_name: str = "create-draft-order"
    function_version: str = "$LATEST"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:create-draft-order"
    aws_request_id: str = "test-request-id-123"

    def get_remaining_time_in_millis(self) -> int:
        return 30000


@pytest.fixture
def lambda_context() -> LambdaContext:
    """Create a Lambda context for testing."""
    return LambdaContext()


@pytest.fixture
def env_vars() -> DraftOrderEnvVars:
    """Fully configured adapter settings with an empty allow-list."""
    return DraftOrderEnvVars(
        SHOPIFY_STORE=TEST_STORE,
        SHOPIFY_ADMIN_TOKEN=TEST_TOKEN,
    )


@pytest.fixture
def sample_body() -> Dict[str, Any]:
    """Request body as sent by the storefront configurator."""
    return {
        "line_items": [
            {
                "title": "Oak Table 180x90",
                "quantity": 2,
                "sku": "TBL-OAK-180",
                "price_cents": 129900,
                "properties": [{"name": "Finish", "value": "Oiled"}],
            },
            {"price_cents": 1999},
        ],
        "note": "Configured online",
    }


@pytest.fixture
def make_event() -> Callable[..., Dict[str, Any]]:
    """Build API Gateway REST proxy events."""

    def _make_event(method: str = "POST", body: Any = None, origin: str = "https://shop.example.com",
                    headers: Dict[str, str] = None) -> Dict[str, Any]:
        event_headers = {"Content-Type": "application/json"}
        if origin:
            event_headers["origin"] = origin
        event_headers.update(headers or {})
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        return {
            "resource": "/draft-orders",
            "path": "/draft-orders",
            "httpMethod": method,
            "headers": event_headers,
            "multiValueHeaders": {},
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "pathParameters": None,
            "stageVariables": None,
            "requestContext": {
                "requestId": "api-request-id-456",
                "stage": "test",
                "httpMethod": method,
                "path": "/draft-orders",
                "identity": {"sourceIp": "127.0.0.1"},
            },
            "body": body,
            "isBase64Encoded": False,
        }

    return _make_event


class ShopifyStub:
    """Records requests and answers with a canned Shopify response."""

    def __init__(self, status_code: int = 201, json_body: Any = None, content: bytes = None,
                 exc: Exception = None) -> None:
        self.status_code = status_code
        self.json_body = json_body
        self.content = content
        self.exc = exc
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def sent_json(self, index: int = 0) -> Dict[str, Any]:
        return json.loads(self.requests[index].content)


@pytest.fixture
def shopify_success() -> ShopifyStub:
    """Shopify answering 201 with a draft order."""
    return ShopifyStub(
        status_code=201,
        json_body={"draft_order": {"id": 994118539, "invoice_url": INVOICE_URL, "status": "open"}},
    )


@pytest.fixture
def shopify_stub_factory() -> Callable[..., ShopifyStub]:
    """Build Shopify stubs with custom answers."""
    return ShopifyStub


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "e2e" in str(item.fspath):
            item.add_marker(pytest.mark.e2e)
