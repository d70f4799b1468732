"""Key lookup for string-keyed and generic mappings.

Neither strategy declines: any key is a valid mapping key, and a key that
is not present reads as ``UNDEFINED``.
"""

from __future__ import annotations

from typing import Any

from mustang._types import Accessor
from mustang.descriptors import TypeDescriptor
from mustang.helpers import UNDEFINED


def try_lookup(key: str) -> Accessor:
    """Accessor doing a try-style ``Mapping.get`` for ``key``.

    ``__missing__`` hooks are not consulted.
    """

    def get_value(instance: Any) -> Any:
        return instance.get(key, UNDEFINED)

    return get_value


def resolve_string_key(desc: TypeDescriptor, key: str, ignore_case: bool) -> Accessor:
    """Lookup on ``str``-keyed maps.

    ``ignore_case`` is ignored: case sensitivity belongs to the mapping.
    """
    return try_lookup(key)


def resolve_generic_key(desc: TypeDescriptor, key: str, ignore_case: bool) -> Accessor:
    """Indexed lookup (``instance[key]``) on any mapping.

    Uses subscripting so ``defaultdict`` and other ``__missing__`` hooks
    apply. A ``KeyError`` from the mapping reads as ``UNDEFINED``.
    """

    def get_item(instance: Any) -> Any:
        try:
            return instance[key]
        except KeyError:
            return UNDEFINED

    return get_item
