"""Tests for AccessorCache: memoised resolution and dotted names."""

from __future__ import annotations

import types
from concurrent.futures import ThreadPoolExecutor

import pytest

from mustang import UNDEFINED, AccessorCache, AmbiguousMemberError, Resolver, ResolverConfig

from .models import Article, Book, Person


class TestAccessor:
    def test_memoised(self, cache: AccessorCache) -> None:
        first = cache.accessor(Article, "title")
        assert cache.accessor(Article, "title") is first
        assert len(cache) == 1

    def test_distinct_triples(self, cache: AccessorCache) -> None:
        cache.accessor(Book, "title", False)
        cache.accessor(Book, "title", True)
        cache.accessor(Book, "Title", False)
        assert len(cache) == 3

    def test_none_uses_config_default(self) -> None:
        cache = AccessorCache(Resolver(ResolverConfig(ignore_case=True)))
        assert cache.accessor(Book, "title") is cache.accessor(Book, "title", True)

    def test_errors_are_not_cached(self, cache: AccessorCache) -> None:
        with pytest.raises(AmbiguousMemberError):
            cache.accessor(Person, "name")
        assert len(cache) == 0

    def test_clear(self, cache: AccessorCache) -> None:
        cache.accessor(list, "0")
        cache.clear()
        assert len(cache) == 0

    def test_default_resolver(self) -> None:
        assert isinstance(AccessorCache().resolver, Resolver)


class TestLookup:
    def test_uses_runtime_type(self, cache: AccessorCache, article: Article) -> None:
        assert cache.lookup(article, "title") == "Hello"
        assert cache.lookup({"a": 1}, "a") == 1
        assert cache.lookup([1, 2], "1") == 2


class TestCompilePath:
    def test_nested(self, cache: AccessorCache) -> None:
        data = {"user": types.SimpleNamespace(address={"city": "Oslo"})}
        get = cache.compile_path("user.address.city")
        assert get(data) == "Oslo"

    def test_index_segment(self, cache: AccessorCache, article: Article) -> None:
        assert cache.compile_path("tags.1")(article) == "b"

    def test_missing_segment_is_absent(self, cache: AccessorCache) -> None:
        get = cache.compile_path("user.name")
        assert get({}) is UNDEFINED
        assert get({"user": None}) is UNDEFINED

    def test_implicit_iterator(self, cache: AccessorCache) -> None:
        value = object()
        assert cache.compile_path(".")(value) is value

    def test_single_segment(self, cache: AccessorCache, article: Article) -> None:
        assert cache.compile_path("title")(article) == "Hello"

    def test_reused_across_runtime_types(self, cache: AccessorCache) -> None:
        get = cache.compile_path("name")
        assert get({"name": "map"}) == "map"
        assert get(types.SimpleNamespace(name="ns")) == "ns"


def test_concurrent_lookups(cache: AccessorCache) -> None:
    rows = [{"id": i, "tags": [str(i)]} for i in range(200)]
    get = cache.compile_path("tags.0")
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(get, rows))
    assert results == [str(i) for i in range(200)]
