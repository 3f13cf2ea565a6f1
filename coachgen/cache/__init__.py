"""
Response caching.
"""

from coachgen.cache.response_cache import ResponseCache

__all__ = ["ResponseCache"]
