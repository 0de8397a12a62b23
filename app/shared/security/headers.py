"""
Secure HTTP headers middleware.

Every response, errors included, carries the same header set.
The content security policy admits the coin-logo CDN as an image source.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

COIN_IMAGE_HOST = "https://coin-images.coingecko.com"


def build_content_security_policy(image_hosts: tuple[str, ...] = ()) -> str:
    """Return a same-origin CSP that also allows the given image hosts."""
    img_src = " ".join(("'self'", *image_hosts))
    return f"default-src 'self'; img-src {img_src}; frame-ancestors 'none'"


SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": build_content_security_policy((COIN_IMAGE_HOST,)),
    "X-XSS-Protection": "1; mode=block",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds ``headers`` (SECURE_HEADERS by default) to every response."""

    def __init__(self, app: ASGIApp, headers: dict[str, str] | None = None) -> None:
        super().__init__(app)
        self._headers = dict(SECURE_HEADERS if headers is None else headers)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        response.headers.update(self._headers)
        return response
