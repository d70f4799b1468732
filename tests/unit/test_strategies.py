"""Tests for the individual accessor strategies."""

from __future__ import annotations

import types
from collections import defaultdict
from collections.abc import Iterator, Mapping
from typing import Any

import pytest

from mustang import UNDEFINED, AmbiguousMemberError, UnsupportedCaseInsensitiveDynamicError
from mustang.descriptors import describe
from mustang.helpers import always_absent
from mustang.strategies import (
    LateBoundMember,
    parse_index,
    resolve_dynamic,
    resolve_generic_key,
    resolve_index,
    resolve_member,
    resolve_string_key,
)

from ..models import Article, Book, Draft, Expando, Ghost, Person, Plain, Registry, Slotted


class StrictMap(Mapping[Any, Any]):
    """Mapping whose __getitem__ raises KeyError for missing keys."""

    def __init__(self, data: dict[Any, Any]):
        self._data = data

    def __getitem__(self, key: Any) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)


class TestParseIndex:
    @pytest.mark.parametrize(("key", "expected"), [("0", 0), ("12", 12), ("007", 7)])
    def test_integer_literals(self, key: str, expected: int) -> None:
        assert parse_index(key) == expected

    @pytest.mark.parametrize(
        "key", ["", "-1", "+1", " 1", "1.0", "1_000", "x", "٣", "9" * 5000]
    )
    def test_rejected(self, key: str) -> None:
        assert parse_index(key) is None


class TestIndexStrategy:
    def test_declines_non_numeric(self) -> None:
        assert resolve_index(describe(list), "name", False) is None

    def test_in_range(self) -> None:
        get = resolve_index(describe(list), "1", False)
        assert get(["a", "b"]) == "b"

    def test_out_of_range_is_absent(self) -> None:
        get = resolve_index(describe(list), "5", False)
        assert get(["a"]) is UNDEFINED
        assert get([]) is UNDEFINED

    def test_checks_live_length(self) -> None:
        items: list[str] = []
        get = resolve_index(describe(list), "0", False)
        assert get(items) is UNDEFINED
        items.append("now")
        assert get(items) == "now"

    def test_stored_none_is_present(self) -> None:
        assert resolve_index(describe(list), "0", False)([None]) is None


class TestStringKeyStrategy:
    def test_present_and_absent(self) -> None:
        get = resolve_string_key(describe(dict[str, Any]), "a", False)
        assert get({"a": 1}) == 1
        assert get({"b": 1}) is UNDEFINED

    def test_ignore_case_is_not_applied(self) -> None:
        get = resolve_string_key(describe(dict[str, Any]), "Name", True)
        assert get({"name": 1}) is UNDEFINED

    def test_does_not_trigger_missing_hook(self) -> None:
        data: defaultdict[str, Any] = defaultdict(int)
        get = resolve_string_key(describe(dict[str, Any]), "k", False)
        assert get(data) is UNDEFINED
        assert "k" not in data


class TestGenericKeyStrategy:
    def test_present(self) -> None:
        assert resolve_generic_key(describe(dict), "a", False)({"a": None}) is None

    def test_missing_key_is_absent(self) -> None:
        get = resolve_generic_key(describe(StrictMap), "a", False)
        assert get(StrictMap({"b": 2})) is UNDEFINED

    def test_missing_hook_applies(self) -> None:
        get = resolve_generic_key(describe(defaultdict), "k", False)
        assert get(defaultdict(int)) == 0


class TestDynamicStrategy:
    def test_ignore_case_fails(self) -> None:
        with pytest.raises(UnsupportedCaseInsensitiveDynamicError) as exc_info:
            resolve_dynamic(describe(Ghost), "ghost", True)
        assert exc_info.value.key == "ghost"
        assert exc_info.value.type_name == "Ghost"

    def test_ignore_case_fails_for_map_backed_types(self) -> None:
        with pytest.raises(UnsupportedCaseInsensitiveDynamicError):
            resolve_dynamic(describe(Expando), "a", True)

    def test_map_backed_uses_key_lookup(self) -> None:
        get = resolve_dynamic(describe(Expando), "a", False)
        assert not isinstance(get, LateBoundMember)
        assert get(Expando(a=1)) == 1
        assert get(Expando()) is UNDEFINED

    def test_getattr_binding(self) -> None:
        get = resolve_dynamic(describe(Ghost), "ghost", False)
        assert isinstance(get, LateBoundMember)
        assert get(Ghost()) == "GHOST"
        assert resolve_dynamic(describe(Ghost), "other", False)(Ghost()) is UNDEFINED

    def test_namespace_binding(self) -> None:
        get = resolve_dynamic(describe(types.SimpleNamespace), "a", False)
        assert get(types.SimpleNamespace(a=1)) == 1
        assert get(types.SimpleNamespace(b=1)) is UNDEFINED

    def test_protocol_binding(self) -> None:
        get = resolve_dynamic(describe(Registry), "a", False)
        assert get(Registry(a="x")) == "x"
        assert get(Registry()) is UNDEFINED

    def test_binds_against_runtime_type(self) -> None:
        # Resolved for SimpleNamespace, called with other dynamic objects
        get = resolve_dynamic(describe(types.SimpleNamespace), "go", False)
        assert get(types.SimpleNamespace(go=1)) == 1
        assert get(Registry(go=2)) == 2
        assert get(Ghost()) == "GO"
        # Cached binders keep working on the next call
        assert get(Registry(go=3)) == 3


class TestMemberStrategy:
    def test_missing_member_is_absent(self, article: Article) -> None:
        assert resolve_member(describe(Article), "author", False)(article) is UNDEFINED

    def test_slotted_type_without_member_is_always_absent(self) -> None:
        assert resolve_member(describe(Slotted), "y", False) is always_absent

    def test_builtin_without_member_is_always_absent(self) -> None:
        assert resolve_member(describe(list), "append", False) is always_absent

    def test_instance_value_shadows_class_default(self) -> None:
        assert resolve_member(describe(Draft), "title", False)(Draft("Hello")) == "Hello"

    @pytest.mark.parametrize("ignore_case", [False, True])
    def test_init_only_attribute(self, ignore_case: bool) -> None:
        get = resolve_member(describe(Plain), "name", ignore_case)
        assert get(Plain("Ada")) == "Ada"

    def test_init_only_attribute_needs_exact_case(self) -> None:
        assert resolve_member(describe(Plain), "Name", True)(Plain("Ada")) is UNDEFINED

    def test_private_init_only_attribute_is_absent(self) -> None:
        assert resolve_member(describe(Plain), "_secret", False) is always_absent

    def test_init_only_method_name_is_absent(self) -> None:
        assert resolve_member(describe(Plain), "greet", False)(Plain("Ada")) is UNDEFINED

    def test_exact_match(self, article: Article) -> None:
        assert resolve_member(describe(Article), "title", False)(article) == "Hello"

    def test_case_only_match_is_absent(self, book: Book) -> None:
        assert resolve_member(describe(Book), "title", False)(book) is UNDEFINED

    def test_case_only_match_with_ignore_case(self, book: Book) -> None:
        assert resolve_member(describe(Book), "title", True)(book) == "Dune"

    @pytest.mark.parametrize("ignore_case", [False, True])
    @pytest.mark.parametrize("key", ["name", "Name", "NAME"])
    def test_ambiguous(self, key: str, ignore_case: bool) -> None:
        with pytest.raises(AmbiguousMemberError) as exc_info:
            resolve_member(describe(Person), key, ignore_case)
        assert exc_info.value.key == key
        assert exc_info.value.candidates == ("Name", "name")

    def test_static_member(self) -> None:
        assert resolve_member(describe(Article), "site_name", False)(None) == "Blog"
