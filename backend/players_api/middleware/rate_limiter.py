"""Per-client request rate limiting.

Two fixed-window limits run on every request:

* general: applies to all requests
* strict: applies on top of the general one to write methods

Counting and window expiry are handled by the ``limits`` package over its
in-memory storage.
"""

import logging
import math
import time

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from limits import RateLimitItem, RateLimitItemPerSecond
from limits.storage import MemoryStorage
from limits.strategies import FixedWindowRateLimiter
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

WRITE_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app: ASGIApp,
        *,
        window_seconds: int = 60,
        max_general: int = 100,
        max_strict: int = 20,
        enabled: bool = True,
    ) -> None:
        super().__init__(app)
        self.enabled = enabled
        self._limiter = FixedWindowRateLimiter(MemoryStorage())
        self._general = RateLimitItemPerSecond(max_general, window_seconds)
        self._strict = RateLimitItemPerSecond(max_strict, window_seconds)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not self.enabled:
            return await call_next(request)

        client = request.client.host if request.client else "unknown"

        if not self._limiter.hit(self._general, "general", client):
            return self._too_many(
                self._general, "general", client, "Too many requests. Please try again later."
            )
        item, scope = self._general, "general"

        if request.method in WRITE_METHODS:
            if not self._limiter.hit(self._strict, "strict", client):
                return self._too_many(
                    self._strict, "strict", client, "Too many write requests. Please try again later."
                )
            item, scope = self._strict, "strict"

        stats = self._limiter.get_window_stats(item, scope, client)
        response = await call_next(request)
        response.headers["RateLimit-Limit"] = str(item.amount)
        response.headers["RateLimit-Remaining"] = str(stats.remaining)
        return response

    def _too_many(self, item: RateLimitItem, scope: str, client: str, message: str) -> JSONResponse:
        stats = self._limiter.get_window_stats(item, scope, client)
        retry_after = max(1, math.ceil(stats.reset_time - time.time()))
        logger.warning("Rate limit (%s) exceeded for client %s", scope, client)
        return JSONResponse(
            status_code=429,
            content={"status": 429, "error": message},
            headers={"Retry-After": str(retry_after)},
        )
