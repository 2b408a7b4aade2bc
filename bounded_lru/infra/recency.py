"""Slab-backed doubly linked list used as the cache's recency sequence.

Slots are stored in parallel lists and linked by integer handles rather
than object references. ``NIL`` marks the absence of a neighbour. Freed
slots are pushed onto a free list and reused by the next insertion, so the
slab never grows beyond the peak number of live entries.
"""

from __future__ import annotations

from typing import Any, Generic, Hashable, Iterator, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

NIL = -1


class RecencyList(Generic[K, V]):
    """Doubly linked list of ``(key, value)`` slots addressed by handle.

    The head is the most recently used slot and the tail the least recently
    used one. Every operation except iteration and ``clear`` is O(1).
    """

    __slots__ = ("_keys", "_values", "_prev", "_next", "_free", "_head", "_tail", "_count")

    def __init__(self) -> None:
        self._keys: list[Any] = []
        self._values: list[Any] = []
        self._prev: list[int] = []
        self._next: list[int] = []
        self._free: list[int] = []
        self._head = NIL
        self._tail = NIL
        self._count = 0

    def __len__(self) -> int:
        return self._count

    @property
    def head(self) -> int:
        return self._head

    @property
    def tail(self) -> int:
        return self._tail

    def key_at(self, handle: int) -> K:
        return self._keys[handle]

    def value_at(self, handle: int) -> V:
        return self._values[handle]

    def set_value(self, handle: int, value: V) -> V:
        """Replace the value stored at ``handle`` and return the old one."""
        previous = self._values[handle]
        self._values[handle] = value
        return previous

    def _allocate(self, key: K, value: V) -> int:
        if self._free:
            handle = self._free.pop()
            self._keys[handle] = key
            self._values[handle] = value
            self._prev[handle] = NIL
            self._next[handle] = NIL
            return handle
        self._keys.append(key)
        self._values.append(value)
        self._prev.append(NIL)
        self._next.append(NIL)
        return len(self._keys) - 1

    def _release(self, handle: int) -> tuple[K, V]:
        key = self._keys[handle]
        value = self._values[handle]
        # Drop references so the payload can be collected while the slot waits for reuse.
        self._keys[handle] = None
        self._values[handle] = None
        self._free.append(handle)
        return key, value

    def _link_front(self, handle: int) -> None:
        self._prev[handle] = NIL
        self._next[handle] = self._head
        if self._head == NIL:
            self._tail = handle
        else:
            self._prev[self._head] = handle
        self._head = handle

    def _unlink(self, handle: int) -> None:
        prev = self._prev[handle]
        nxt = self._next[handle]
        if prev == NIL:
            self._head = nxt
        else:
            self._next[prev] = nxt
        if nxt == NIL:
            self._tail = prev
        else:
            self._prev[nxt] = prev
        self._prev[handle] = NIL
        self._next[handle] = NIL

    def push_front(self, key: K, value: V) -> int:
        handle = self._allocate(key, value)
        self._link_front(handle)
        self._count += 1
        return handle

    def pop_back(self) -> tuple[K, V] | None:
        if self._tail == NIL:
            return None
        return self.remove(self._tail)

    def remove(self, handle: int) -> tuple[K, V]:
        """Detach a live slot and return its ``(key, value)``."""
        self._unlink(handle)
        self._count -= 1
        return self._release(handle)

    def move_to_front(self, handle: int) -> None:
        if handle == self._head:
            return
        self._unlink(handle)
        self._link_front(handle)

    def clear(self) -> None:
        self._keys.clear()
        self._values.clear()
        self._prev.clear()
        self._next.clear()
        self._free.clear()
        self._head = NIL
        self._tail = NIL
        self._count = 0

    def handles(self) -> Iterator[int]:
        handle = self._head
        while handle != NIL:
            nxt = self._next[handle]
            yield handle
            handle = nxt

    def __iter__(self) -> Iterator[tuple[K, V]]:
        for handle in self.handles():
            yield self._keys[handle], self._values[handle]

    def __reversed__(self) -> Iterator[tuple[K, V]]:
        handle = self._tail
        while handle != NIL:
            prev = self._prev[handle]
            yield self._keys[handle], self._values[handle]
            handle = prev
