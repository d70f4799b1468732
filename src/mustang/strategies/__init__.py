"""Accessor strategies, one per shape.

Each strategy has the signature ``(descriptor, key, ignore_case)`` and
returns an accessor, returns None to decline, or raises a
``ResolutionError`` to stop resolution.
"""

from __future__ import annotations

from types import MappingProxyType

from mustang._types import Shape, Strategy
from mustang.strategies.dynamic import LateBoundMember, bind_member, resolve_dynamic
from mustang.strategies.lists import parse_index, resolve_index
from mustang.strategies.mappings import resolve_generic_key, resolve_string_key, try_lookup
from mustang.strategies.members import resolve_member

# Default bindings, read-only
DEFAULT_STRATEGIES: MappingProxyType[Shape, Strategy] = MappingProxyType(
    {
        Shape.INDEXABLE_LIST: resolve_index,
        Shape.STRING_KEYED_MAP: resolve_string_key,
        Shape.GENERIC_MAP: resolve_generic_key,
        Shape.DYNAMIC_OBJECT: resolve_dynamic,
        Shape.PLAIN_OBJECT: resolve_member,
    }
)

__all__ = [
    "DEFAULT_STRATEGIES",
    "LateBoundMember",
    "bind_member",
    "parse_index",
    "resolve_dynamic",
    "resolve_generic_key",
    "resolve_index",
    "resolve_member",
    "resolve_string_key",
    "try_lookup",
]
