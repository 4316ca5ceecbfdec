"""Base cache store for the leaderboard snapshot."""

import json
import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from codeeval.core.constants import CACHE_KEY, CacheLimits
from codeeval.models.cache import CacheEntry, CacheStatusInfo
from codeeval.models.leaderboard import ModelRecord

logger = logging.getLogger(__name__)


class BaseCacheStore(ABC):
    """Abstract TTL-bounded store holding the last good leaderboard.

    Subclasses only move raw JSON strings in and out of a backend; encoding,
    freshness and the fail-soft policy live here. ``read`` never raises and
    ``write`` never fails the caller.
    """

    def __init__(
        self,
        ttl_hours: float = CacheLimits.MAX_CACHE_AGE_HOURS,
        key: str = CACHE_KEY,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize cache store.

        Args:
            ttl_hours: Hours an entry stays fresh
            key: Versioned storage key
            clock: Returns current epoch time in seconds
        """
        self.ttl_seconds = ttl_hours * 3600
        self.key = key
        self.clock = clock

    @abstractmethod
    def _get_raw(self, key: str) -> str | None:
        """Return the stored string for key, or None."""

    @abstractmethod
    def _set_raw(self, key: str, value: str) -> None:
        """Store a string under key, replacing any previous value."""

    @abstractmethod
    def _delete_raw(self, key: str) -> None:
        """Remove key if present."""

    @property
    def location(self) -> str:
        """Human-readable description of where entries live."""
        return self.__class__.__name__

    def load_entry(self) -> CacheEntry | None:
        """Load the stored entry regardless of age.

        Returns:
            Decoded entry or None if missing or unreadable
        """
        try:
            raw = self._get_raw(self.key)
            if not raw:
                return None
            return CacheEntry.model_validate(json.loads(raw))
        except Exception as e:
            logger.debug(f"Cache entry {self.key} could not be loaded, treating as cold cache: {e}")
            return None

    def read(self) -> CacheEntry | None:
        """Return the cached entry if it is fresh and non-empty.

        Returns:
            Fresh cache entry or None
        """
        entry = self.load_entry()
        if entry is None:
            return None
        if not entry.is_fresh(self.ttl_seconds, now=self.clock()):
            logger.debug(f"Cache entry {self.key} is stale or empty ({entry.age_seconds(self.clock()):.0f}s old)")
            return None
        return entry

    def write(self, records: Sequence[ModelRecord]) -> None:
        """Replace the cached entry with records, stamped with the current time.

        Args:
            records: Normalized leaderboard records
        """
        entry = CacheEntry(timestamp=int(self.clock() * 1000), data=list(records))
        try:
            self._set_raw(self.key, entry.model_dump_json(by_alias=True))
            logger.debug(f"Cached {len(entry.data)} records under {self.key}")
        except Exception as e:
            logger.error(f"Error caching leaderboard under {self.key}: {e}")

    def clear(self) -> None:
        """Remove the cached entry."""
        try:
            self._delete_raw(self.key)
            logger.info(f"Cleared leaderboard cache {self.key}")
        except Exception as e:
            logger.error(f"Error clearing cache: {e}")

    def status(self) -> CacheStatusInfo:
        """Summarize the stored entry.

        Returns:
            CacheStatusInfo describing presence, size and age
        """
        entry = self.load_entry()
        status = CacheStatusInfo(location=self.location)
        if entry is None:
            return status

        now = self.clock()
        status.has_entry = True
        status.total_items = len(entry.data)
        status.cache_age_hours = entry.age_seconds(now) / 3600
        status.is_fresh = entry.is_fresh(self.ttl_seconds, now=now)
        return status


class MemoryCacheStore(BaseCacheStore):
    """In-process cache store, used in tests and when no disk cache is wanted."""

    def __init__(
        self,
        ttl_hours: float = CacheLimits.MAX_CACHE_AGE_HOURS,
        key: str = CACHE_KEY,
        clock: Callable[[], float] = time.time,
    ) -> None:
        super().__init__(ttl_hours=ttl_hours, key=key, clock=clock)
        self._items: dict[str, str] = {}

    def _get_raw(self, key: str) -> str | None:
        return self._items.get(key)

    def _set_raw(self, key: str, value: str) -> None:
        self._items[key] = value

    def _delete_raw(self, key: str) -> None:
        self._items.pop(key, None)

    @property
    def location(self) -> str:
        return "memory"
