"""
Cache entry models.

Sandi Metz Principles:
- Single Responsibility: Cache data structure
- Clear naming: Descriptive fields
"""

import time

from pydantic import BaseModel, Field


class CacheEntry(BaseModel):
    """Cached raw response for one prompt."""

    prompt: str = Field(..., description="Exact prompt text (the cache key)")
    response: str = Field(..., description="Raw generated text")
    created_at: float = Field(
        default_factory=time.monotonic, description="Monotonic creation time"
    )
    hit_count: int = Field(default=0, ge=0, description="Number of cache hits")

    def age_seconds(self, now: float) -> float:
        """
        Calculate entry age.

        Args:
            now: Current monotonic time

        Returns:
            Age in seconds
        """
        return now - self.created_at

    def is_expired(self, max_age_seconds: float, now: float) -> bool:
        """Check if entry is older than max age."""
        return self.age_seconds(now) >= max_age_seconds

    def increment_hit_count(self) -> None:
        """Increment cache hit counter."""
        self.hit_count += 1


class CacheStats(BaseModel):
    """Response cache counters."""

    hits: int = Field(default=0, ge=0)
    misses: int = Field(default=0, ge=0)
    evictions: int = Field(default=0, ge=0)
    expirations: int = Field(default=0, ge=0)
    size: int = Field(default=0, ge=0)

    @property
    def hit_rate(self) -> float:
        """Calculate hit rate."""
        total = self.hits + self.misses
        if total == 0:
            return 0.0
        return self.hits / total
