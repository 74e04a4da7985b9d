"""Cache test fixtures — temporary roots and a self-cleaning cache factory."""

from __future__ import annotations

import pytest

from syncdisk.cache import Cache


@pytest.fixture()
def tmp_cache_dir(tmp_path):
    """Provide a temporary parent directory for cache roots."""
    cache_dir = tmp_path / "syncdisk_cache"
    cache_dir.mkdir()
    return cache_dir


@pytest.fixture()
def make_cache(tmp_cache_dir):
    """Factory for caches rooted under ``tmp_cache_dir``; clears them afterwards."""
    created = []

    def _make(namespace="test-cache", **kwargs):
        kwargs.setdefault("location", tmp_cache_dir)
        cache = Cache(namespace, **kwargs)
        created.append(cache)
        return cache

    yield _make

    for cache in created:
        cache.clear()


@pytest.fixture()
def cache(make_cache):
    return make_cache()
