"""Simple in-memory TTL cache. No Redis needed.

Note: Each uvicorn worker has its own cache instance. With --workers 2,
an edition may be fetched twice (once per worker). The cache still
eliminates repeated calls within the same worker.

All access happens on the event loop thread, so no locking is done here.
"""

import time
from typing import Callable, Generic, TypeVar

V = TypeVar("V")


class TTLCache(Generic[V]):
    def __init__(
        self,
        ttl_seconds: float = 300,
        cleanup_interval_seconds: float = 600,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.cleanup_interval_seconds = cleanup_interval_seconds
        self._clock = clock
        self._store: dict[str, tuple[float, V]] = {}
        self._last_cleanup = clock()

    def __len__(self) -> int:
        return len(self._store)

    def get(self, key: str) -> V | None:
        if key in self._store:
            expires_at, value = self._store[key]
            if self._clock() < expires_at:
                return value
            del self._store[key]
        return None

    def set(self, key: str, value: V, ttl_seconds: float | None = None) -> None:
        now = self._clock()
        if now - self._last_cleanup >= self.cleanup_interval_seconds:
            self.purge_expired()
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        self._store[key] = (now + ttl, value)

    def delete(self, key: str) -> None:
        self._store.pop(key, None)

    def purge_expired(self) -> int:
        """Drop every expired entry. Returns how many were removed."""
        now = self._clock()
        self._last_cleanup = now
        expired = [key for key, (expires_at, _) in self._store.items() if expires_at <= now]
        for key in expired:
            del self._store[key]
        return len(expired)
