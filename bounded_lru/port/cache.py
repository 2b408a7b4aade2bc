"""Cache port: Protocol for a bounded key-value cache."""

from __future__ import annotations

from typing import Hashable, Protocol, runtime_checkable


@runtime_checkable
class CachePort(Protocol):
    """Port for a bounded key-value cache with recency-based eviction.

    Keys and values are typed as ``Hashable`` and ``object`` here; the
    element types live on the concrete ``LRUCache[K, V]`` a caller holds.
    """

    @property
    def capacity(self) -> int:
        """Maximum number of entries the cache holds."""
        ...

    def get(self, key: Hashable, default: object = None) -> object:
        """Retrieve a cached value and mark it recently used, or return default."""
        ...

    def put(self, key: Hashable, value: object) -> object:
        """Store a value, evicting the least recently used entry if full."""
        ...

    def remove(self, key: Hashable, default: object = None) -> object:
        """Delete a key and return its value, or default when absent."""
        ...

    def __contains__(self, key: object) -> bool:
        """Report whether key is cached, without touching recency."""
        ...

    def __len__(self) -> int:
        """Return the number of cached entries."""
        ...
