"""
Create Draft Order Lambda Function - Entry point for the draft order API.

Delegates to the handler in the shared ``draft_orders`` package, which is
bundled next to this file by ``scripts/build.py``.
"""

import os
import sys
from typing import Any, Dict

# Make src/ importable when running from the source tree
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from draft_orders.handlers.create_draft_order import lambda_handler as draft_order_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for the draft order API.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    return draft_order_handler(event, context)
