"""In-memory cache for slow-changing Golemio reference data.

Holds the air quality component/index lookup tables and city district
snapshots. One instance lives for the whole process and is handed to every
service that needs it.

Expiry is passive: a stale entry is dropped when it is looked up, there is no
background sweeper and no explicit invalidation. Capacity is unbounded because
the key space is a handful of reference tables plus a few district queries.

Thread safety: entries are immutable and written with a single dict
assignment, so readers never observe a half-written entry. Two concurrent
misses on the same key may both call the fetcher; the last write wins, which
is harmless because both compute the same value.
"""

import logging
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Generic, Optional, TypeVar

from .result import Failure, Result, Success

T = TypeVar("T")

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(hours=24)


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """A cached value and the monotonic time after which it is stale."""

    key: str
    value: T
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class LookupCache:
    """Time-based cache with fetch-on-miss semantics."""

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or time.monotonic
        self._entries: dict[str, CacheEntry[Any]] = {}

    def get_or_fetch(self, key: str, fetcher: Callable[[], Result[T]], ttl: timedelta = DEFAULT_TTL) -> Result[T]:
        """Return the cached value for ``key`` or populate it via ``fetcher``.

        Args:
            key: Deterministic key derived from the request parameters
            fetcher: Called on a miss or an expired entry
            ttl: How long a successful fetch stays fresh

        Returns:
            The cached value wrapped in ``Success``, the freshly fetched
            ``Success``, or the fetcher's ``Failure`` unchanged. Failures are
            never stored, so the next call retries the fetch.
        """
        now = self._clock()
        entry = self._entries.get(key)
        if entry is not None:
            if not entry.is_expired(now):
                logger.debug(f"Cache hit for {key}")
                return Success(entry.value)
            logger.debug(f"Cache entry for {key} expired, evicting")
            self._entries.pop(key, None)

        result = fetcher()
        if isinstance(result, Failure):
            logger.debug(f"Fetch for {key} failed, not caching")
            return result

        self._entries[key] = CacheEntry(key=key, value=result.data, expires_at=self._clock() + ttl.total_seconds())
        logger.debug(f"Cached {key} for {ttl}")
        return result

    def __contains__(self, key: object) -> bool:
        entry = self._entries.get(key)  # type: ignore[call-overload]
        return entry is not None and not entry.is_expired(self._clock())

    def __len__(self) -> int:
        """Number of unexpired entries; stale ones still stored are not counted."""
        now = self._clock()
        return sum(1 for entry in list(self._entries.values()) if not entry.is_expired(now))


def district_cache_key(districts: Optional[list[str]], limit: int, offset: int) -> str:
    """Build the cache key for a city district query."""
    return f"citydistricts_{','.join(districts or [])}_{limit}_{offset}"
