"""Cache module for CodeEval."""

from codeeval.cache.base import BaseCacheStore, MemoryCacheStore
from codeeval.cache.leaderboard import DiskCacheStore

__all__ = [
    "BaseCacheStore",
    "DiskCacheStore",
    "MemoryCacheStore",
]
