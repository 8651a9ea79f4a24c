"""Security headers middleware."""

from typing import Any

from fastapi import Request
from fastapi.responses import Response

SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "no-referrer",
}


async def security_headers_middleware(request: Request, call_next: Any) -> Response:
    """Add security headers to responses.

    Args:
        request: The incoming request.
        call_next: The next middleware or route handler.

    Returns:
        Response: Response with security headers added.
    """
    response = await call_next(request)
    response.headers.update(SECURITY_HEADERS)
    # Question data changes under the client; never let intermediaries cache it
    if request.url.path.startswith("/api/"):
        response.headers.setdefault("Cache-Control", "no-store")
    return response
