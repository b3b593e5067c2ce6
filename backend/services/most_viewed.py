"""Cache-aware most-viewed fetch.

Only allow-listed editions are cached. Any other code goes straight to CAPI
and never reads or writes the cache.
"""

import asyncio
import logging

from errors import UpstreamError
from models import CapiResponse
from services.cache import TTLCache
from services.capi import CapiClient

logger = logging.getLogger(__name__)


class MostViewedService:
    def __init__(
        self,
        client: CapiClient,
        cache: TTLCache[CapiResponse],
        cached_editions: frozenset[str],
    ):
        self.client = client
        self.cache = cache
        self.cached_editions = cached_editions
        self._inflight: dict[str, asyncio.Future[CapiResponse]] = {}

    async def fetch(self, code: str) -> CapiResponse:
        if code in self.cached_editions:
            return await self.cached_get(code)
        return await self.client.most_viewed(code)

    async def cached_get(self, code: str) -> CapiResponse:
        """Return the cached list for ``code``, fetching it on a miss.

        Concurrent misses for the same code share a single upstream call.
        A failed fetch leaves the cache untouched.
        """
        cached = self.cache.get(code)
        if cached is not None:
            logger.debug("Cache hit for %s", code)
            return cached

        task = self._inflight.get(code)
        if task is None:
            logger.debug("Cache miss for %s", code)
            task = asyncio.ensure_future(self._fetch_and_store(code))
            self._inflight[code] = task
            task.add_done_callback(lambda done: self._forget(code, done))
        # One cancelled caller must not cancel the fetch for the others.
        return await asyncio.shield(task)

    async def _fetch_and_store(self, code: str) -> CapiResponse:
        try:
            items = await self.client.most_viewed(code)
        except UpstreamError as e:
            raise e.wrap("CAPI GET failed") from e

        self.cache.set(code, items)
        return items

    def _forget(self, code: str, task: asyncio.Future) -> None:
        if self._inflight.get(code) is task:
            del self._inflight[code]
