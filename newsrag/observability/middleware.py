"""
HTTP middleware for request tracing.

CorrelationMiddleware binds an X-Correlation-ID (client-supplied or fresh)
to the request context so every log line of the request carries it.
RequestLoggingMiddleware emits one line per request and one per response,
including the chat session a response belongs to. Health probes log at
DEBUG to keep the INFO stream readable.

Dependencies: fastapi, starlette, newsrag.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from newsrag.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
QUIET_PATH_PREFIXES = ("/health",)


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its status and time-to-headers."""

    async def dispatch(self, request: Request, call_next):
        """
        Log the request, delegate, then log the response.

        Streamed chat answers are timed to the first byte only; the body is
        still being produced when this returns.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Downstream response, unchanged
        """
        start = time.perf_counter()
        path = request.url.path
        level = logging.DEBUG if path.startswith(QUIET_PATH_PREFIXES) else logging.INFO
        context = {"method": request.method, "path": path}

        logger.log(
            level,
            f"{request.method} {path}",
            extra={**context, "client_host": request.client.host if request.client else None},
        )

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{request.method} {path} - Unhandled {type(e).__name__}",
                extra={**context, "process_time_ms": _elapsed_ms(start)},
            )
            raise

        logger.log(
            level,
            f"{request.method} {path} - {response.status_code}",
            extra={
                **context,
                "status_code": response.status_code,
                "session_id": response.headers.get("X-Session-Id"),
                "process_time_ms": _elapsed_ms(start),
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Propagate X-Correlation-ID through the request context and back."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
