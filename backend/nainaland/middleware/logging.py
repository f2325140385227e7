"""
Nainaland Backend — Request Logging Middleware
================================================

What:  One access log line for every HTTP request.
How:   Times the downstream call and logs method, path, status, duration,
       request id and client IP. A request whose handler raised is logged
       as a 500 before the exception continues to the error handlers.

What we log vs what we DON'T log (privacy):
    ✅ Log: method, path, status, duration, IP, request ID
    ❌ Don't log: request bodies (contact form PII, passwords), Authorization header
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from nainaland.middleware.request_id import request_id_var

logger = logging.getLogger("nainaland.access")


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, anything else → INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log. /health is skipped so uptime probes don't drown real traffic."""

    SKIPPED_PATHS = frozenset({"/health"})

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.SKIPPED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            self._log(request, 500, started)
            raise

        self._log(request, response.status_code, started)
        return response

    def _log(self, request: Request, status: int, started: float) -> None:
        duration_ms = (time.perf_counter() - started) * 1000
        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            request_id_var.get(""),
            request.client.host if request.client else "unknown",
        )
