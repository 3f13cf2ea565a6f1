"""
In-memory prompt -> response cache.

Keyed by the exact prompt text. Bounded by entry count (oldest evicted
first) and entry age (expired entries dropped on access).

Sandi Metz Principles:
- Single Responsibility: Cache raw generated text
- Small class: Focused caching logic
- Dependency Injection: Limits and clock injected
"""

import threading
import time
from collections import OrderedDict
from typing import Callable, Optional

from coachgen.config import config
from coachgen.models.cache_entry import CacheEntry, CacheStats
from coachgen.utils.logger import get_logger, log_cache_hit, log_cache_miss

logger = get_logger(__name__)


class ResponseCache:
    """
    Thread-safe response cache.

    Concurrent requests for the same prompt are not merged; each miss
    results in its own fetch and the last put wins.
    """

    def __init__(
        self,
        max_entries: Optional[int] = None,
        max_age_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize response cache.

        Args:
            max_entries: Maximum cached prompts (config default if None)
            max_age_seconds: Maximum entry age (config default if None)
            clock: Monotonic time source
        """
        self._max_entries = max_entries or config.cache_max_entries
        self._max_age = max_age_seconds or config.cache_max_age_seconds
        self._clock = clock
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = threading.Lock()
        self._stats = CacheStats()

    def get(self, prompt: str) -> Optional[str]:
        """
        Get cached response for prompt.

        Args:
            prompt: Prompt text

        Returns:
            Cached raw text, or None on miss or expiry
        """
        with self._lock:
            entry = self._entries.get(prompt)
            if entry is not None and entry.is_expired(self._max_age, self._clock()):
                del self._entries[prompt]
                self._stats.expirations += 1
                entry = None

            if entry is None:
                self._stats.misses += 1
                log_cache_miss(prompt)
                return None

            entry.increment_hit_count()
            self._stats.hits += 1

        log_cache_hit(prompt, hit_count=entry.hit_count)
        return entry.response

    def put(self, prompt: str, response: str) -> None:
        """
        Store response for prompt, replacing any previous entry.

        Args:
            prompt: Prompt text
            response: Raw generated text
        """
        with self._lock:
            self._purge_expired()
            self._entries.pop(prompt, None)
            self._entries[prompt] = CacheEntry(
                prompt=prompt, response=response, created_at=self._clock()
            )
            self._evict_overflow()
            size = len(self._entries)

        logger.debug("Cached response", size=size, max_entries=self._max_entries)

    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            self._entries.clear()

    @property
    def stats(self) -> CacheStats:
        """Get a snapshot of cache counters."""
        with self._lock:
            return self._stats.model_copy(update={"size": len(self._entries)})

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, prompt: object) -> bool:
        with self._lock:
            entry = self._entries.get(prompt)  # type: ignore[arg-type]
            return entry is not None and not entry.is_expired(
                self._max_age, self._clock()
            )

    def _purge_expired(self) -> None:
        """Drop expired entries. Caller holds the lock."""
        now = self._clock()
        expired = [
            key
            for key, entry in self._entries.items()
            if entry.is_expired(self._max_age, now)
        ]
        for key in expired:
            del self._entries[key]
        self._stats.expirations += len(expired)

    def _evict_overflow(self) -> None:
        """Evict oldest entries beyond max size. Caller holds the lock."""
        while len(self._entries) > self._max_entries:
            oldest, _ = self._entries.popitem(last=False)
            self._stats.evictions += 1
            logger.debug("Evicted cached response", prompt=oldest[:100])
