"""Memoised resolution and dotted-name lookup.

The compiler resolves each distinct ``(type, key, ignore_case)`` once and
reuses the accessor for every render. ``AccessorCache`` is that memo,
plus two conveniences built on it:

- ``lookup(value, key)``: resolve against ``type(value)`` and read
- ``compile_path("a.b.c")``: one accessor for a dotted Mustache name

Thread-Safety:
The memo is replaced (copy-on-write), never mutated in place. Two threads
missing the same triple at once both resolve it; either accessor is
equivalent, so the last write wins harmlessly.

"""

from __future__ import annotations

from typing import Any

from mustang._types import Accessor
from mustang.helpers import UNDEFINED, is_absent
from mustang.resolver import Resolver

# Mustache implicit iterator: {{.}} is the current context itself
IMPLICIT_ITERATOR = "."


def _identity(instance: Any) -> Any:
    return instance


class AccessorCache:
    """Per-compilation memo of resolved accessors.

    Example:
            >>> cache = AccessorCache()
            >>> cache.lookup({"user": {"name": "Ada"}}, "user")
            {'name': 'Ada'}
            >>> get_name = cache.compile_path("user.name")
            >>> get_name({"user": {"name": "Ada"}})
            'Ada'

    """

    __slots__ = ("_accessors", "_resolver")

    def __init__(self, resolver: Resolver | None = None) -> None:
        self._resolver = resolver or Resolver()
        self._accessors: dict[tuple[Any, str, bool], Accessor] = {}

    @property
    def resolver(self) -> Resolver:
        return self._resolver

    def __len__(self) -> int:
        return len(self._accessors)

    def accessor(self, tp: Any, key: str, ignore_case: bool | None = None) -> Accessor:
        """Resolve ``key`` on ``tp``, reusing an earlier result if any."""
        if ignore_case is None:
            ignore_case = self._resolver.config.ignore_case
        cache_key = (tp, key, ignore_case)
        accessor = self._accessors.get(cache_key)
        if accessor is None:
            accessor = self._resolver.resolve(tp, key, ignore_case)
            new = self._accessors.copy()
            new[cache_key] = accessor
            self._accessors = new
        return accessor

    def lookup(self, value: Any, key: str, ignore_case: bool | None = None) -> Any:
        """Read ``key`` from ``value`` using its runtime type."""
        return self.accessor(type(value), key, ignore_case)(value)

    def compile_path(self, path: str, ignore_case: bool | None = None) -> Accessor:
        """Build one accessor for a dotted name such as ``"user.address.city"``.

        Each segment is resolved against the runtime type of the value the
        previous segment produced. An absent or None intermediate value
        makes the whole path absent.
        """
        if path == IMPLICIT_ITERATOR:
            return _identity
        segments = tuple(path.split("."))

        def get_path(instance: Any) -> Any:
            value = instance
            for segment in segments:
                if value is None or is_absent(value):
                    return UNDEFINED
                value = self.accessor(type(value), segment, ignore_case)(value)
            return value

        return get_path

    def clear(self) -> None:
        """Drop every memoised accessor."""
        self._accessors = {}
