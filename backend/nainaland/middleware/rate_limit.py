"""
Nainaland Backend — Rate Limiting Middleware
==============================================

What:  Per-IP sliding window limit on the public write endpoints.
Why:   The contact form and the login form are the only things an anonymous
       visitor can POST to. Without a limit, a script can fill the admin inbox
       or brute-force the admin password.
How:   SlidingWindowLimiter keeps recent hit timestamps per (client IP, route).
       Each limited route is counted separately, so a visitor who sent a few
       messages can still log in.

Algorithm: Sliding Window Log
    1. Drop timestamps older than the window
    2. If the remaining count >= limit, reject with Retry-After
    3. Otherwise record now and pass the request on

Scope:
    State lives in this middleware instance, so it is per process and resets
    on restart, which matches the lifetime of everything else in this app.
"""

import logging
import time
from collections import defaultdict, deque
from typing import Deque, Dict, FrozenSet, Optional, Tuple

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from nainaland.config import settings
from nainaland.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

LIMITED_ROUTES: FrozenSet[Tuple[str, str]] = frozenset({
    ("POST", "/api/messages"),
    ("POST", "/api/auth/login"),
})

# Above this many tracked keys, idle ones are swept on the next hit
_SWEEP_THRESHOLD = 1000

LimitKey = Tuple[str, str]


class SlidingWindowLimiter:
    """Counts hits per key inside a moving time window."""

    def __init__(self):
        self._hits: Dict[LimitKey, Deque[float]] = defaultdict(deque)

    def __len__(self) -> int:
        return len(self._hits)

    def hit(self, key: LimitKey, limit: int, window: int, now: float) -> Optional[int]:
        """
        Record a hit for `key` unless it is over the limit.

        Returns None when the hit is allowed, otherwise the number of whole
        seconds until the oldest hit leaves the window.
        """
        hits = self._hits[key]
        while hits and hits[0] <= now - window:
            hits.popleft()

        if len(hits) >= limit:
            return int(hits[0] + window - now) + 1

        hits.append(now)
        if len(self._hits) > _SWEEP_THRESHOLD:
            self.sweep(now - window)
        return None

    def sweep(self, cutoff: float) -> None:
        """Forget keys whose newest hit is older than `cutoff`."""
        idle = [key for key, hits in self._hits.items() if not hits or hits[-1] <= cutoff]
        for key in idle:
            del self._hits[key]
        if idle:
            logger.debug("Swept %d idle rate limit entries", len(idle))


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Applies SlidingWindowLimiter to LIMITED_ROUTES.

    Configuration (read per request from settings):
        rate_limit_requests: Max requests per window per IP and route
        rate_limit_window:   Window duration in seconds
    """

    def __init__(self, app, **kwargs):
        super().__init__(app, **kwargs)
        self.limiter = SlidingWindowLimiter()

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        route = (request.method, request.url.path.rstrip("/"))
        if route not in LIMITED_ROUTES:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        retry_after = self.limiter.hit(
            (client_ip, route[1]),
            limit=settings.rate_limit_requests,
            window=settings.rate_limit_window,
            now=time.time(),
        )
        if retry_after is None:
            return await call_next(request)

        logger.warning(
            "Rate limit exceeded for IP %s on %s %s (limit %d per %ds)",
            client_ip,
            request.method,
            request.url.path,
            settings.rate_limit_requests,
            settings.rate_limit_window,
        )
        return JSONResponse(
            status_code=429,
            content={
                "error": "rate_limit_exceeded",
                "message": f"Too many requests. Please wait {retry_after} seconds before retrying.",
                "details": {"retry_after": retry_after},
                "request_id": request_id_var.get(""),
            },
            headers={"Retry-After": str(retry_after)},
        )
