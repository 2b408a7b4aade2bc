"""Domain specific exceptions."""

from __future__ import annotations


class LRUCacheError(Exception):
    """Base class for bounded-lru errors."""


class InvalidCapacityError(LRUCacheError, ValueError):
    """Raised when a cache is constructed with an unusable capacity."""

    def __init__(self, capacity: object) -> None:
        self.capacity = capacity
        super().__init__(
            f"capacity must be a non-negative integer, got {capacity!r}"
        )
