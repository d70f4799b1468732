"""Late-bound member lookup for dynamically-shaped objects.

A dynamic type cannot list its members ahead of time, so the accessor
binds a lookup against the *runtime* type of each instance. Binding
happens once per runtime type; later calls reuse the binder.

Binder variants:
    - ``DynamicMembers`` objects: ``instance.try_get_member(name)``
    - plain ``SimpleNamespace``: instance ``__dict__`` lookup
    - everything else: ``getattr`` with ``AttributeError`` read as absent

Thread-Safety:
The per-type binder table is replaced (copy-on-write), never mutated in
place, so concurrent callers always see a complete table. Two threads
binding the same type at once both produce equivalent binders.

"""

from __future__ import annotations

import types
from typing import Any

from mustang._types import Accessor
from mustang.descriptors import DynamicMembers, TypeDescriptor
from mustang.exceptions import UnsupportedCaseInsensitiveDynamicError
from mustang.helpers import UNDEFINED
from mustang.strategies.mappings import try_lookup


def bind_member(runtime_type: type, name: str) -> Accessor:
    """Choose how to read ``name`` from instances of ``runtime_type``."""
    if issubclass(runtime_type, DynamicMembers):

        def get_dynamic(instance: Any) -> Any:
            return instance.try_get_member(name)

        return get_dynamic

    if runtime_type is types.SimpleNamespace:

        def get_namespace(instance: Any) -> Any:
            return vars(instance).get(name, UNDEFINED)

        return get_namespace

    def get_attribute(instance: Any) -> Any:
        try:
            return getattr(instance, name)
        except AttributeError:
            return UNDEFINED

    return get_attribute


class LateBoundMember:
    """Accessor for ``name`` bound per runtime type on first use."""

    __slots__ = ("_binders", "name")

    def __init__(self, name: str):
        self.name = name
        self._binders: dict[type, Accessor] = {}

    def __call__(self, instance: Any) -> Any:
        runtime_type = type(instance)
        binder = self._binders.get(runtime_type)
        if binder is None:
            binder = bind_member(runtime_type, self.name)
            new = self._binders.copy()
            new[runtime_type] = binder
            self._binders = new
        return binder(instance)

    def __repr__(self) -> str:
        return f"<LateBoundMember {self.name!r}>"


def resolve_dynamic(desc: TypeDescriptor, key: str, ignore_case: bool) -> Accessor:
    """Accessor for ``key`` on a dynamic type.

    Raises:
        UnsupportedCaseInsensitiveDynamicError: ``ignore_case`` was requested.
    """
    if ignore_case:
        raise UnsupportedCaseInsensitiveDynamicError(key, desc.name)

    # Map-backed dynamic objects: a plain key lookup is enough
    if desc.declares_string_keys:
        return try_lookup(key)

    return LateBoundMember(key)
