"""Caching layer for language detection results."""

import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from threading import RLock
from typing import Any, Dict, Optional, Tuple

import xxhash

from .models import DetectionResult


logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """A single cache entry with metadata."""

    results: Tuple[DetectionResult, ...]
    timestamp: float

    def is_valid(self, max_age_seconds: int) -> bool:
        """Check if cache entry is still valid based on age."""
        age = time.time() - self.timestamp
        return age < max_age_seconds


@dataclass
class CacheStatistics:
    """Statistics for cache performance monitoring."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    puts: int = 0

    @property
    def total_requests(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        if self.total_requests == 0:
            return 0.0
        return self.hits / self.total_requests


class DetectionCache:
    """
    Thread-safe LRU cache for detection results.

    Keys are xxhash digests of the analyzed text. The cache knows nothing
    about the languages that produced a result, so the owner must clear it
    whenever its language collection changes.
    """

    def __init__(self, max_size: int = 1000, max_age_seconds: int = 3600):
        """
        Initialize the cache.

        Args:
            max_size: Maximum number of entries to cache
            max_age_seconds: Maximum age of cache entries in seconds
        """
        self.max_size = max_size
        self.max_age_seconds = max_age_seconds
        self._cache: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = RLock()
        self.statistics = CacheStatistics()

        logger.info(
            f"Initialized DetectionCache with max_size={max_size}, "
            f"max_age_seconds={max_age_seconds}"
        )

    def _get_cache_key(self, text: str) -> str:
        return xxhash.xxh64(text.encode("utf-8")).hexdigest()

    def get(self, text: str) -> Optional[Tuple[DetectionResult, ...]]:
        """
        Retrieve cached results for a text.

        Returns:
            Cached results or None if not found/expired
        """
        key = self._get_cache_key(text)

        with self._lock:
            entry = self._cache.get(key)
            if entry is not None:
                if entry.is_valid(self.max_age_seconds):
                    self._cache.move_to_end(key)
                    self.statistics.hits += 1
                    logger.debug(f"Cache hit for key={key}")
                    return entry.results
                del self._cache[key]
                logger.debug(f"Removed expired entry for key={key}")

            self.statistics.misses += 1
            return None

    def put(self, text: str, results: Tuple[DetectionResult, ...]) -> None:
        """Store the results for a text, evicting the least recently used entry if full."""
        key = self._get_cache_key(text)

        with self._lock:
            if key in self._cache:
                del self._cache[key]
            elif len(self._cache) >= self.max_size:
                oldest_key, _ = self._cache.popitem(last=False)
                self.statistics.evictions += 1
                logger.debug(f"Evicted oldest entry: key={oldest_key}")

            self._cache[key] = CacheEntry(results=tuple(results), timestamp=time.time())
            self.statistics.puts += 1

    def clear(self) -> None:
        """Clear all entries from the cache."""
        with self._lock:
            self._cache.clear()
            logger.debug("Cache cleared")

    def reset_statistics(self) -> None:
        """Reset cache statistics."""
        with self._lock:
            self.statistics = CacheStatistics()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def get_info(self) -> Dict[str, Any]:
        """
        Get cache information and statistics.

        Returns:
            Dictionary with cache info and statistics
        """
        with self._lock:
            return {
                "size": len(self._cache),
                "max_size": self.max_size,
                "max_age_seconds": self.max_age_seconds,
                "hit_rate": self.statistics.hit_rate,
                "statistics": {
                    "hits": self.statistics.hits,
                    "misses": self.statistics.misses,
                    "evictions": self.statistics.evictions,
                    "puts": self.statistics.puts,
                    "total_requests": self.statistics.total_requests,
                },
            }

    def cleanup_expired(self) -> int:
        """
        Remove expired entries from the cache.

        Returns:
            Number of entries removed
        """
        with self._lock:
            expired_keys = [
                key for key, entry in self._cache.items()
                if not entry.is_valid(self.max_age_seconds)
            ]
            for key in expired_keys:
                del self._cache[key]

            if expired_keys:
                logger.info(f"Cleaned up {len(expired_keys)} expired cache entries")

            return len(expired_keys)
