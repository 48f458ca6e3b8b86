"""
Error handling utilities for the draft order adapter.

Every failure of an invocation is raised as a ``BaseServiceError`` subclass,
logged with its classification and translated into the ``{ok: false, ...}``
envelope with a matching HTTP status code.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from aws_lambda_powertools.metrics import MetricUnit

from draft_orders.handlers.utils.observability import logger, metrics, tracer


class ErrorSeverity(str, Enum):
    """Error severity levels for classification."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    VALIDATION = "VALIDATION"
    CONFIGURATION = "CONFIGURATION"
    EXTERNAL_SERVICE = "EXTERNAL_SERVICE"
    TIMEOUT = "TIMEOUT"


class UpstreamFailureReason(str, Enum):
    """Why the upstream call was considered failed."""
    REJECTED = "rejected"
    MALFORMED = "malformed"
    TIMEOUT = "timeout"


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.VALIDATION,
        details: Any = None,
        has_details: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.severity = severity
        self.category = category
        self.details = details
        # details may legitimately be null (an upstream body of "null")
        self.has_details = has_details
        self.error_id = str(uuid.uuid4())

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_id": self.error_id,
            "error_code": self.error_code,
            "error_message": self.message,
            "severity": self.severity.value,
            "category": self.category.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }


class ClientInputError(BaseServiceError):
    """Raised when the request body does not carry usable line items."""

    def __init__(self, message: str = "No line_items"):
        super().__init__(
            message=message,
            error_code="CLIENT_INPUT_ERROR",
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
        )


class MethodNotAllowedError(BaseServiceError):
    """Raised for any verb other than POST and OPTIONS."""

    def __init__(self, method: Optional[str] = None):
        super().__init__(
            message="Method Not Allowed",
            error_code="METHOD_NOT_ALLOWED",
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
        )
        self.method = method


class ConfigurationError(BaseServiceError):
    """Raised when the deployment lacks the store domain or admin token."""

    def __init__(self, message: str = "Missing SHOPIFY_STORE / SHOPIFY_ADMIN_TOKEN"):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
        )


class UpstreamError(BaseServiceError):
    """Raised when Shopify rejects the draft order or answers with an unexpected shape."""

    def __init__(
        self,
        reason: UpstreamFailureReason,
        message: str = "Shopify error",
        status_code: Optional[int] = None,
        details: Any = None,
        has_details: bool = True,
    ):
        super().__init__(
            message=message,
            error_code="UPSTREAM_ERROR",
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.TIMEOUT if reason == UpstreamFailureReason.TIMEOUT else ErrorCategory.EXTERNAL_SERVICE,
            details=details,
            has_details=has_details,
        )
        self.reason = reason
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        error_dict = super().to_dict()
        error_dict.update({
            "reason": self.reason.value,
            "upstream_status_code": self.status_code,
        })
        return error_dict


@tracer.capture_method
def log_error_metrics(error: BaseServiceError) -> None:
    """Log error metrics for monitoring and alerting."""

    metrics.add_metric(name="ErrorCount", unit=MetricUnit.Count, value=1)
    metrics.add_metric(name=f"Error{error.category.value}Count", unit=MetricUnit.Count, value=1)

    tracer.put_annotation("error_code", error.error_code)
    tracer.put_annotation("error_category", error.category.value)
    tracer.put_metadata("error_details", error.to_dict())

    if error.severity in (ErrorSeverity.LOW, ErrorSeverity.MEDIUM):
        logger.warning("Request rejected", extra=error.to_dict())
    else:
        logger.error("Service error occurred", extra=error.to_dict())


def format_error_response(error: BaseServiceError) -> Dict[str, Any]:
    """Format error for the response envelope."""

    response: Dict[str, Any] = {
        "ok": False,
        "error": error.message,
    }

    if error.has_details:
        response["details"] = error.details

    return response


def get_http_status_code(error: BaseServiceError) -> int:
    """Get appropriate HTTP status code for error."""

    status_mapping = {
        "CLIENT_INPUT_ERROR": 400,
        "METHOD_NOT_ALLOWED": 405,
        "CONFIGURATION_ERROR": 500,
        "UPSTREAM_ERROR": 500,
    }

    return status_mapping.get(error.error_code, 500)
