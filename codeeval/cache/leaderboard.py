"""Disk-backed leaderboard cache using DiskCache."""

import logging
import time
from collections.abc import Callable
from pathlib import Path

from diskcache import Cache

from codeeval.cache.base import BaseCacheStore
from codeeval.core.constants import CACHE_KEY, CacheLimits
from codeeval.exceptions import CacheError

logger = logging.getLogger(__name__)


class DiskCacheStore(BaseCacheStore):
    """Persists the leaderboard snapshot as a JSON string in a DiskCache directory."""

    def __init__(
        self,
        cache_dir: Path | None = None,
        ttl_hours: float = CacheLimits.MAX_CACHE_AGE_HOURS,
        key: str = CACHE_KEY,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize disk cache.

        Args:
            cache_dir: Cache directory (defaults to ~/.codeeval/cache)
            ttl_hours: Hours an entry stays fresh
            key: Versioned storage key
            clock: Returns current epoch time in seconds

        Raises:
            CacheError: If the cache directory cannot be created or opened
        """
        super().__init__(ttl_hours=ttl_hours, key=key, clock=clock)

        cache_path = cache_dir or Path.home() / ".codeeval" / "cache"
        try:
            cache_path.mkdir(parents=True, exist_ok=True)
            self.cache = Cache(str(cache_path))
        except OSError as e:
            raise CacheError(f"Cannot open cache directory {cache_path}: {e}", {"path": str(cache_path)}) from e
        self.cache_path = cache_path

        logger.debug(f"Initialized leaderboard cache at {cache_path}")

    def _get_raw(self, key: str) -> str | None:
        value = self.cache.get(key)
        return value if isinstance(value, str) else None

    def _set_raw(self, key: str, value: str) -> None:
        # DiskCache expiry only evicts; freshness is still judged from the entry timestamp
        self.cache.set(key, value, expire=self.ttl_seconds)

    def _delete_raw(self, key: str) -> None:
        self.cache.delete(key)

    @property
    def location(self) -> str:
        return str(self.cache_path)

    def close(self) -> None:
        """Close the underlying DiskCache handle."""
        self.cache.close()

    def __del__(self) -> None:
        """Close cache when object is destroyed."""
        if hasattr(self, "cache"):
            self.cache.close()
