"""Request size limit + security headers middleware."""

import logging

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)

_SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        for header, value in _SECURITY_HEADERS.items():
            response.headers[header] = value
        return response


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests whose declared body is larger than ``max_body_size`` bytes."""

    def __init__(self, app, max_body_size: int = 1024 * 1024):
        super().__init__(app)
        self.max_body_size = max_body_size

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path == "/health":
            return await call_next(request)

        content_length = request.headers.get("content-length")
        try:
            declared = int(content_length) if content_length else 0
        except ValueError:
            return JSONResponse(status_code=400, content={"error": "Invalid Content-Length header"})

        if declared > self.max_body_size:
            logger.warning("Rejected %s body of %d bytes", request.url.path, declared)
            return JSONResponse(
                status_code=413,
                content={"error": f"Request body too large. Max size is {self.max_body_size} bytes."},
            )

        return await call_next(request)
