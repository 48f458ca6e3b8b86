"""
API Gateway proxy response helpers.
"""

import json
from typing import Any, Dict, Optional


def create_api_response(
    status_code: int,
    body: Any,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Create an API Gateway proxy response; dict bodies are JSON encoded."""

    if body is None:
        body = ''
    elif not isinstance(body, str):
        body = json.dumps(body)

    return {
        'statusCode': status_code,
        'headers': dict(headers or {}),
        'body': body,
    }
