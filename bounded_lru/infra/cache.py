"""Bounded LRU cache with O(1) lookup, update and eviction."""

from __future__ import annotations

import logging
import operator
from typing import Generic, Hashable, Iterator, TypeVar

import structlog

from ..domain.errors import InvalidCapacityError
from .config import Settings, get_settings
from .recency import RecencyList

# Stdlib-backed: silent until the host application configures logging.
logger = structlog.wrap_logger(logging.getLogger(__name__))

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
D = TypeVar("D")


class LRUCache(Generic[K, V]):
    """Fixed-capacity cache that evicts the least recently used entry.

    A ``dict`` maps each key to a handle in a :class:`RecencyList`, whose
    head is the most recently used entry and whose tail is the next
    eviction victim. Both ``get`` hits and ``put`` calls move the entry to
    the head.

    A capacity of zero is accepted: such a cache stores nothing, ``put`` is
    a no-op and ``get`` always misses.

    Values evicted by capacity pressure are dropped; values removed with
    :meth:`remove` are handed back to the caller.

    The cache is not internally synchronized. Callers sharing one instance
    across threads must guard every call with their own lock.
    """

    def __init__(self, capacity: int) -> None:
        size = _as_capacity(capacity)
        if size is None:
            logger.warning("Invalid cache capacity rejected", capacity=repr(capacity))
            raise InvalidCapacityError(capacity)
        self._capacity = size
        self._index: dict[K, int] = {}
        self._order: RecencyList[K, V] = RecencyList()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> LRUCache[K, V]:
        """Build a cache sized by ``Settings.default_capacity``."""
        settings = settings or get_settings()
        return cls(settings.default_capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[K]:
        for key, _ in self._order:
            yield key

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={len(self._index)})"

    def get(self, key: K, default: D | None = None) -> V | D | None:
        """Return the value for ``key`` and mark it most recently used.

        A miss returns ``default`` and leaves the cache untouched.
        """
        handle = self._index.get(key)
        if handle is None:
            return default
        self._order.move_to_front(handle)
        return self._order.value_at(handle)

    def peek(self, key: K, default: D | None = None) -> V | D | None:
        """Return the value for ``key`` without changing recency."""
        handle = self._index.get(key)
        if handle is None:
            return default
        return self._order.value_at(handle)

    def put(self, key: K, value: V) -> V | None:
        """Store ``value`` under ``key`` as the most recently used entry.

        Returns the value previously stored under ``key``, or ``None`` for a
        new key. Inserting a new key into a full cache evicts the least
        recently used entry first.
        """
        handle = self._index.get(key)
        if handle is not None:
            previous = self._order.set_value(handle, value)
            self._order.move_to_front(handle)
            return previous

        if self._capacity == 0:
            return None

        if len(self._index) >= self._capacity:
            self._evict()
        self._index[key] = self._order.push_front(key, value)
        return None

    def remove(self, key: K, default: D | None = None) -> V | D | None:
        """Delete ``key`` and return its value, or ``default`` when absent."""
        handle = self._index.pop(key, None)
        if handle is None:
            return default
        _, value = self._order.remove(handle)
        return value

    def peek_lru(self) -> tuple[K, V] | None:
        """Return the entry that would be evicted next, without touching it."""
        return next(reversed(self._order), None)

    def keys(self) -> list[K]:
        return [key for key, _ in self._order]

    def values(self) -> list[V]:
        return [value for _, value in self._order]

    def items(self) -> list[tuple[K, V]]:
        """Snapshot of entries, most recently used first."""
        return list(self._order)

    def clear(self) -> None:
        dropped = len(self._index)
        self._index.clear()
        self._order.clear()
        logger.debug("LRU cache cleared", dropped=dropped)

    def _evict(self) -> None:
        evicted = self._order.pop_back()
        if evicted is None:
            return
        key, _ = evicted
        del self._index[key]


def _as_capacity(capacity: object) -> int | None:
    """Coerce any true integer (``__index__``) to ``int``; ``None`` if unusable."""
    if isinstance(capacity, bool):
        return None
    try:
        size = operator.index(capacity)
    except TypeError:
        return None
    return size if size >= 0 else None
