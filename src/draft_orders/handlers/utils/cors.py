"""
CORS header computation for browser callers.

The allow-list policy is deliberately permissive: an unknown origin is not
rejected, it receives the first allow-listed origin instead, which the
browser then refuses to match.
"""

from typing import Dict, List, Optional, Sequence

ALLOW_METHODS = 'POST, OPTIONS'
ALLOW_HEADERS = 'Content-Type'
MAX_AGE_SECONDS = 86400
WILDCARD_ORIGIN = '*'


def parse_allowed_origins(raw: Optional[str]) -> List[str]:
    """Split a comma-separated allow-list, trimming entries and dropping empty ones."""
    if not raw:
        return []
    return [origin.strip() for origin in raw.split(',') if origin.strip()]


class CorsPolicy:
    """Resolves the Access-Control-Allow-Origin value for a caller origin."""

    def __init__(self, allowed_origins: Sequence[str] = ()) -> None:
        self.allowed_origins = [origin for origin in allowed_origins if origin]

    @classmethod
    def from_allow_list(cls, raw: Optional[str]) -> 'CorsPolicy':
        return cls(parse_allowed_origins(raw))

    def resolve_origin(self, origin: Optional[str]) -> str:
        if not self.allowed_origins:
            return WILDCARD_ORIGIN
        if origin and origin in self.allowed_origins:
            return origin
        return self.allowed_origins[0]

    def headers(self, origin: Optional[str]) -> Dict[str, str]:
        """Headers attached to every response of one invocation."""
        return {
            'Access-Control-Allow-Origin': self.resolve_origin(origin),
            'Access-Control-Allow-Methods': ALLOW_METHODS,
            'Access-Control-Allow-Headers': ALLOW_HEADERS,
            'Access-Control-Max-Age': str(MAX_AGE_SECONDS),
            'Content-Type': 'application/json',
        }
