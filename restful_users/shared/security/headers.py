"""
Secure HTTP headers middleware.

Adds security-related headers to every response. Responses under the
API prefix are additionally marked as non-cacheable since they carry
personal data.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
}

API_PREFIX = "/api/"
NO_STORE = "no-store"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds secure HTTP headers to every response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for header_name, header_value in SECURE_HEADERS.items():
            response.headers[header_name] = header_value
        if request.url.path.startswith(API_PREFIX):
            response.headers["Cache-Control"] = NO_STORE
        return response
