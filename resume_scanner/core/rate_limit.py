from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from resume_scanner.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def rate_limit(limit: str | None = None):
    """Per-route limit; ``limit`` overrides the service-wide RATE_LIMIT."""
    if not settings.rate_limit_enabled:
        def decorator(func):
            return func

        return decorator
    return limiter.limit(limit or settings.rate_limit)
