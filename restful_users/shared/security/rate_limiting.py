"""
Rate limiting configuration and setup.

Uses slowapi to apply a default per-client limit to every endpoint
through ``SlowAPIMiddleware``. The limiter can be switched off with
the ``RATE_LIMIT_ENABLED`` setting.
"""

from http import HTTPStatus

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from restful_users.core.config import settings
from restful_users.shared.errors.handlers import full_status

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit_default],
    enabled=settings.rate_limit_enabled,
)


async def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a JSON body shaped like other errors.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response.
    """
    status = HTTPStatus.TOO_MANY_REQUESTS
    return JSONResponse(
        status_code=status.value,
        content={
            "error": f"Rate limit exceeded: {exc.detail}",
            "status": full_status(status),
        },
    )
