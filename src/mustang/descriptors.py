"""Type descriptors: capability queries over Python types.

A descriptor wraps a class or a parameterised generic alias
(``dict[str, Any]``, ``Mapping[str, object]``) and answers the questions
the shape classifier needs:

- can it be indexed by position and measured with ``len()``?
- is it a mapping, and does it declare ``str`` keys with untyped values?
- is its member set dynamic (not statically enumerable)?
- do its instances carry a ``__dict__`` for undeclared attributes?
- which members does it expose?

Descriptors are immutable and cached per type, so resolving many keys
against the same type inspects it once.
"""

from __future__ import annotations

import types
import typing
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Protocol, get_args, get_origin, runtime_checkable

from mustang.members import Member, find_members, member_table

# Sequences whose items are characters or bytes, not template data
_TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray, memoryview)

# Value types that make a str-keyed mapping a "string-keyed map"
_UNTYPED_VALUES: tuple[Any, ...] = (Any, object)


@runtime_checkable
class DynamicMembers(Protocol):
    """Capability for objects whose members are resolved at runtime.

    ``try_get_member`` returns the member value, or ``UNDEFINED`` when the
    object has no member by that name.
    """

    def try_get_member(self, name: str) -> Any: ...


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """Immutable capability summary of a type.

    Attributes:
        type: The type as given (class or generic alias)
        origin: The runtime class behind ``type``
        is_indexable: Positional ``__getitem__`` plus ``len()`` (non-text Sequence)
        is_mapping: Key-based ``__getitem__`` (``collections.abc.Mapping``)
        declares_string_keys: Mapping declared as ``str`` -> ``Any``/``object``
        is_dynamic: Member set is not statically enumerable
        has_instance_dict: Instances can hold attributes no class declares
    """

    type: Any
    origin: type
    is_indexable: bool
    is_mapping: bool
    declares_string_keys: bool
    is_dynamic: bool
    has_instance_dict: bool

    @property
    def name(self) -> str:
        return self.origin.__qualname__

    def members(self) -> Mapping[str, tuple[Member, ...]]:
        """Flattened member table keyed by case-folded name."""
        return member_table(self.origin)

    def find_members(self, key: str) -> tuple[Member, ...]:
        """Members whose name matches ``key`` ignoring case."""
        return find_members(self.origin, key)

    def has_member(self, key: str) -> bool:
        """True if a public member named exactly ``key`` exists."""
        return any(found.name == key for found in self.find_members(key))

    def is_assignable_from(self, other: Any) -> bool:
        """True if values of ``other`` are instances of this type."""
        return issubclass(describe(other).origin, self.origin)


def _origin_class(tp: Any) -> type:
    if tp is None:
        return type(None)
    origin = get_origin(tp) or tp
    return origin if isinstance(origin, type) else object


def _is_string_keyed(args: tuple[Any, ...]) -> bool:
    return len(args) == 2 and args[0] is str and args[1] in _UNTYPED_VALUES


def _declares_string_keys(tp: Any, origin: type) -> bool:
    if typing.is_typeddict(origin):
        return True
    if not issubclass(origin, Mapping):
        return False
    if get_origin(tp) is not None:
        return _is_string_keyed(get_args(tp))
    # Parameterised bases: class Bag(dict[str, Any])
    for klass in origin.__mro__:
        for base in types.get_original_bases(klass):
            base_origin = get_origin(base)
            if isinstance(base_origin, type) and issubclass(base_origin, Mapping):
                if _is_string_keyed(get_args(base)):
                    return True
    return False


def _is_dynamic(origin: type) -> bool:
    if issubclass(origin, types.SimpleNamespace):
        return True
    if issubclass(origin, DynamicMembers):
        return True
    # Scan the MRO directly: getattr() on the class would also find
    # metaclass hooks such as EnumType.__getattr__
    return any("__getattr__" in vars(klass) for klass in origin.__mro__)


@lru_cache(maxsize=1024)
def describe(tp: Any) -> TypeDescriptor:
    """Build (or fetch the cached) descriptor for ``tp``.

    Args:
        tp: A class, a parameterised generic alias, or None (NoneType).
            Anything else that is not a class describes as ``object``.
    """
    if isinstance(tp, TypeDescriptor):
        return tp
    origin = _origin_class(tp)
    is_mapping = issubclass(origin, Mapping)
    return TypeDescriptor(
        type=tp,
        origin=origin,
        is_indexable=issubclass(origin, Sequence) and not issubclass(origin, _TEXT_TYPES),
        is_mapping=is_mapping,
        declares_string_keys=_declares_string_keys(tp, origin),
        is_dynamic=_is_dynamic(origin),
        # Zero for builtins and for classes restricted by __slots__
        has_instance_dict=origin.__dictoffset__ != 0,
    )
