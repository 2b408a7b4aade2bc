"""bounded-lru

Fixed-capacity least-recently-used cache with O(1) get, put, remove and
eviction.

Usage:
    from bounded_lru import LRUCache

    cache = LRUCache[str, bytes](128)
    cache.put("a", b"payload")
    cache.get("a")
"""

from bounded_lru.domain.errors import InvalidCapacityError, LRUCacheError
from bounded_lru.infra.cache import LRUCache
from bounded_lru.port.cache import CachePort

__all__ = ["CachePort", "InvalidCapacityError", "LRUCache", "LRUCacheError"]
__version__ = "0.1.0"
