"""Port interfaces for cache consumers."""

from bounded_lru.port.cache import CachePort

__all__ = ["CachePort"]
