"""Per-client rate limiting.

One slowapi Limiter per app holds the in-memory fixed-window counters. The
check itself runs in RateLimitMiddleware against the limiter's ``limits``
backend under a single "global" scope, so every request, matched route or
not, counts against the same window and a rejected request never reaches
routing, the cache, or upstream.
"""

import logging

from limits import RateLimitItem, parse
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

WINDOW = "minute"
SCOPE = "global"


def build_limiter() -> Limiter:
    """Fresh in-memory limiter with its own counters."""
    return Limiter(key_func=get_remote_address, storage_uri="memory://", strategy="fixed-window")


def application_limit(max_requests: int) -> RateLimitItem:
    """``max_requests`` per client per 60s window."""
    return parse(f"{max_requests}/{WINDOW}")


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, limiter: Limiter, limit: RateLimitItem):
        super().__init__(app)
        self.limiter = limiter
        self.limit = limit

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        client_id = get_remote_address(request)
        if not self.limiter.limiter.hit(self.limit, client_id, SCOPE):
            logger.warning("Rate limit exceeded for %s (%s)", client_id, self.limit)
            return JSONResponse({"error": "Too many requests", "detail": str(self.limit)}, status_code=429)
        return await call_next(request)
