"""Response cache for GET routes, keyed by path and query string."""
import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from urllib.parse import urlencode

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CachedResponse:
    """Stored response body, status, content type and expiry (monotonic seconds)."""

    body: bytes
    status_code: int
    media_type: str | None
    expires_at: float


class ResponseCache:
    """In-memory cache with a fixed time-to-live and maximum entry count.

    When full, the oldest entry is evicted. Expired entries are dropped on read.
    """

    def __init__(self, ttl: float = 10.0, max_entries: int = 100) -> None:
        """Initialize empty cache.

        Args:
            ttl: Seconds an entry stays valid.
            max_entries: Maximum number of stored responses.
        """
        self.ttl = ttl
        self.max_entries = max_entries
        self._entries: OrderedDict[str, CachedResponse] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> CachedResponse | None:
        """Get a live entry, or None if missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at <= time.monotonic():
            del self._entries[key]
            return None
        return entry

    def set(self, key: str, body: bytes, status_code: int, media_type: str | None) -> None:
        """Store a response, evicting the oldest entry when full."""
        if self.ttl <= 0 or self.max_entries <= 0:
            return
        self._entries.pop(key, None)
        while len(self._entries) >= self.max_entries:
            self._entries.popitem(last=False)
        self._entries[key] = CachedResponse(
            body=body,
            status_code=status_code,
            media_type=media_type,
            expires_at=time.monotonic() + self.ttl,
        )

    def clear(self) -> None:
        """Clear all cached responses."""
        self._entries.clear()


def cache_key(request: Request) -> str:
    """Route + re-encoded query key; parameter order does not matter."""
    query = urlencode(sorted(request.query_params.multi_items()))
    return f"{request.url.path}?{query}"


class ResponseCacheMiddleware(BaseHTTPMiddleware):
    """Serve repeated identical GET requests from a ResponseCache.

    Only HTTP 200 responses are stored, so failures are always retried upstream.
    """

    def __init__(self, app, cache: ResponseCache) -> None:  # noqa: ANN001
        super().__init__(app)
        self.cache = cache

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method != "GET" or self.cache.ttl <= 0:
            return await call_next(request)

        key = cache_key(request)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return Response(
                content=cached.body,
                status_code=cached.status_code,
                media_type=cached.media_type,
            )

        response = await call_next(request)
        if response.status_code != 200:
            return response

        body = b"".join([chunk async for chunk in response.body_iterator])
        self.cache.set(key, body, response.status_code, response.headers.get("content-type"))
        return Response(
            content=body,
            status_code=response.status_code,
            headers=dict(response.headers),
        )
