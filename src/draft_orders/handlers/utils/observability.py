"""
Centralized observability utilities for the draft order adapter.

Configured instances of AWS Lambda Powertools for logging, tracing and
metrics, shared by every layer of the service.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

METRICS_NAMESPACE = 'DraftOrderAdapter'
SERVICE_NAME = 'draft-order-adapter'

# JSON output format, level taken from LOG_LEVEL
logger: Logger = Logger(service=SERVICE_NAME)

# Disabled outside Lambda or by setting POWERTOOLS_TRACE_DISABLED to "true"
tracer: Tracer = Tracer(service=SERVICE_NAME)

# Embedded metric format, flushed by log_metrics at the end of each invocation
metrics = Metrics(namespace=METRICS_NAMESPACE, service=SERVICE_NAME)
