"""
Rate Limiting Service

Protects the API from abuse with slowapi.

Key Features:
=============
1. IP-based rate limiting, honouring proxy headers
2. A default limit on every route (SlowAPIMiddleware)
3. A stricter limit on register and login (RATE_LIMIT_AUTH)
4. JSON 429 responses with Retry-After

Storage defaults to in-process memory; point RATE_LIMIT_STORAGE_URI at
a shared backend when running several API instances.
"""

import logging

from fastapi import Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from app.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


def get_client_ip(request: Request) -> str:
    """
    Get client IP address for rate limiting.

    X-Forwarded-For may carry a chain of addresses; the first one is
    the client. Falls back to X-Real-IP, then the socket peer.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return get_remote_address(request)


def create_limiter() -> Limiter:
    limiter = Limiter(
        key_func=get_client_ip,
        default_limits=[settings.rate_limit_default],
        storage_uri=settings.rate_limit_storage_uri,
        strategy="fixed-window",
        enabled=settings.rate_limit_enabled,
    )

    logger.info(
        f"Rate limiter initialized - enabled: {settings.rate_limit_enabled}, "
        f"default: {settings.rate_limit_default}, auth: {settings.rate_limit_auth}"
    )

    return limiter


limiter = create_limiter()


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Turn RateLimitExceeded into a 429 with a Retry-After header."""
    limit_detail = str(exc.detail)

    response = JSONResponse(
        status_code=429,
        content={
            "error": "rate_limit_exceeded",
            "detail": "Too many requests. Please slow down.",
            "limit": limit_detail,
        },
    )

    # Fixed-window limits here are all per-minute
    response.headers["Retry-After"] = str(60)
    response.headers["X-RateLimit-Limit"] = limit_detail

    logger.warning(f"Rate limit exceeded for {get_client_ip(request)}: {limit_detail}")

    return response
