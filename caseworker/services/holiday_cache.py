"""
In-memory cache for the bank holiday calendar.

A good snapshot is reused for ``ttl_seconds``. Refreshes are single-flight:
one caller fetches while concurrent callers wait on the lock and receive the
result of that fetch. Unavailable results are handed to those waiters but are
never cached, so the next call retries.

When a refresh fails, the previous snapshot keeps being served until it is
``max_stale_seconds`` old; after that the failure is returned to the caller.
"""

import asyncio
import logging
import time
from typing import Callable, Optional
from caseworker.adapters.base import HolidaySource
from caseworker.models.holiday import HolidayLookup, HolidaySnapshot

logger = logging.getLogger(__name__)

CACHE_TTL_SECONDS = 60 * 60  # 1 hour
MAX_STALE_SECONDS = 24 * 60 * 60  # 1 day


class HolidayCache:
    """Single-flight TTL cache around a HolidaySource."""

    def __init__(
        self,
        source: HolidaySource,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        max_stale_seconds: float = MAX_STALE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.source = source
        self.ttl_seconds = ttl_seconds
        self.max_stale_seconds = max_stale_seconds
        self._clock = clock
        self._lock = asyncio.Lock()
        self._snapshot: Optional[HolidaySnapshot] = None
        self._fetched_at: float = 0.0
        # Bumped after every completed fetch; lets waiters reuse its result
        self._generation = 0
        self._last_result: Optional[HolidayLookup] = None

    def _age(self) -> float:
        return self._clock() - self._fetched_at

    def _is_fresh(self) -> bool:
        return self._snapshot is not None and self._age() < self.ttl_seconds

    async def get_snapshot(self) -> HolidayLookup:
        """Return the cached snapshot, refreshing it if missing or expired."""
        if self._is_fresh():
            return self._snapshot

        generation = self._generation
        async with self._lock:
            if self._generation != generation:
                # A fetch completed while we waited for the lock
                return self._last_result
            if self._is_fresh():
                return self._snapshot
            result = await self._refresh()
            self._last_result = result
            self._generation += 1
            return result

    async def _refresh(self) -> HolidayLookup:
        result = await self.source.fetch()
        if isinstance(result, HolidaySnapshot):
            self._snapshot = result
            self._fetched_at = self._clock()
            logger.info(
                "Bank holiday calendar refreshed",
                extra={"source": self.source.name, "regions": sorted(result.regions)},
            )
            return result

        if self._snapshot is not None and self._age() < self.max_stale_seconds:
            logger.warning(
                "Bank holiday refresh failed, serving previous calendar: %s",
                result.reason,
                extra={"source": self.source.name, "age_seconds": round(self._age(), 1)},
            )
            return self._snapshot

        logger.warning(
            "Bank holiday calendar unavailable: %s",
            result.reason,
            extra={"source": self.source.name},
        )
        return result

    def clear(self) -> None:
        """Drop the cached snapshot."""
        self._snapshot = None
        self._fetched_at = 0.0
