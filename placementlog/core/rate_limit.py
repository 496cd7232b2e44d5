"""
Rate limiting configuration using slowapi.

Storage defaults to in-process memory; point ``rate_limit_storage_uri`` at
Redis when running several workers so limits are shared.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from placementlog.core.config import settings


def _get_subject_or_ip(request: Request) -> str:
    """
    Rate-limit key: authenticated subject ID if available, otherwise client IP.

    Login and register are unauthenticated, so they are limited per IP.
    """
    principal = getattr(request.state, "principal", None)
    if principal is not None:
        return f"{principal.role.value}:{principal.subject_id}"
    return get_remote_address(request)


limiter = Limiter(
    key_func=_get_subject_or_ip,
    storage_uri=settings.rate_limit_storage_uri,
    strategy="fixed-window",
    enabled=settings.rate_limit_enabled,
)

# Pre-defined rate limit strings for use in route decorators:
#   @limiter.limit(RATE_AUTH)
RATE_AUTH = "5/minute"           # login, register - brute-force protection
RATE_WRITE = "30/minute"         # post and placement submissions
