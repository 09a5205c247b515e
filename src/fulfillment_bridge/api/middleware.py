"""API middleware for request logging and security headers."""

import logging
import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from fulfillment_bridge.observability.context import request_context

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request logging and timing."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Response]
    ) -> Response:
        """Log request details and timing with request-id correlation."""
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id

        with request_context(request_id):
            start_time = time.perf_counter()
            logger.info(
                "Request started",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "client": request.client.host if request.client else "unknown",
                },
            )

            try:
                response = await call_next(request)
            except Exception as e:
                processing_time = int((time.perf_counter() - start_time) * 1000)
                logger.error(
                    "Request failed",
                    extra={"error": str(e), "processing_time_ms": processing_time},
                )
                raise

            processing_time = int((time.perf_counter() - start_time) * 1000)

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Processing-Time-Ms"] = str(processing_time)

            logger.info(
                "Request completed",
                extra={
                    "status_code": response.status_code,
                    "processing_time_ms": processing_time,
                },
            )

        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security-related headers to all responses."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Response]
    ) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        return response
