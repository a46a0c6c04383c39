"""Simple in-memory TTL cache. No Redis needed.

Note: Each uvicorn worker has its own cache instance (one per app built by
create_app). With --workers 2, data may be fetched twice (once per worker).
Two concurrent first requests for the same key inside one worker will also
both go upstream; there is no single-flight.
"""

import time
from collections.abc import Callable
from typing import Any


def cache_key(*parts: Any) -> str:
    """Join route name and parameter values into a deterministic key."""
    return ":".join(str(part) for part in parts)


# Returned by get() on a miss; a stored JSON null is a hit.
MISSING = object()


class TTLCache:
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._store: dict[str, tuple[float, Any]] = {}

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._store:
            expires_at, value = self._store[key]
            if self._clock() < expires_at:
                return value
            del self._store[key]
        return default

    def set(self, key: str, value: Any, ttl_seconds: int = 60) -> None:
        self._store[key] = (self._clock() + ttl_seconds, value)

    def clear(self) -> None:
        self._store.clear()

    def __contains__(self, key: str) -> bool:
        return self.get(key, MISSING) is not MISSING

    def __len__(self) -> int:
        return len(self._store)
