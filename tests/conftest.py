"""Shared test fixtures for bounded-lru tests."""

from __future__ import annotations

import pytest

from bounded_lru.infra.cache import LRUCache
from bounded_lru.infra.config import get_settings


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Settings are memoized; drop them so env changes in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def pair_cache() -> LRUCache[int, str]:
    """Capacity-2 cache used by the reference scenarios."""
    return LRUCache[int, str](2)


@pytest.fixture
def filled_cache() -> LRUCache[int, str]:
    """Capacity-3 cache holding keys 1..3, key 3 most recently used."""
    cache = LRUCache[int, str](3)
    cache.put(1, "foo")
    cache.put(2, "bar")
    cache.put(3, "fizz")
    return cache
