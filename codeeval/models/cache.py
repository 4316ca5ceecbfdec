"""Cache-related data models."""

import time

from pydantic import BaseModel, Field

from codeeval.models.leaderboard import ModelRecord


class CacheEntry(BaseModel):
    """Persisted leaderboard snapshot. Replaced wholesale, never edited in place."""

    timestamp: int  # epoch milliseconds
    data: list[ModelRecord] = Field(default_factory=list)

    def age_seconds(self, now: float | None = None) -> float:
        """Age of the entry in seconds.

        Args:
            now: Current epoch time in seconds (defaults to time.time())

        Returns:
            Seconds elapsed since the entry was written
        """
        current = time.time() if now is None else now
        return current - self.timestamp / 1000

    def is_fresh(self, ttl_seconds: float, now: float | None = None) -> bool:
        """Check whether the entry may be served instead of fetching."""
        return bool(self.data) and self.age_seconds(now) < ttl_seconds


class CacheStatusInfo(BaseModel):
    """Model for cache status information."""

    has_entry: bool = False
    is_fresh: bool = False
    total_items: int = 0
    cache_age_hours: float | None = None
    location: str | None = None
