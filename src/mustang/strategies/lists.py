"""Index lookup for indexable sequences."""

from __future__ import annotations

from typing import Any

from mustang._types import Accessor
from mustang.descriptors import TypeDescriptor
from mustang.helpers import UNDEFINED


def parse_index(key: str) -> int | None:
    """Parse a non-negative integer literal, or return None.

    Only ASCII digits are accepted: signs, whitespace, underscores and
    non-ASCII digits are not indices. Neither are digit strings past the
    interpreter's integer conversion limit.
    """
    if not (key.isascii() and key.isdigit()):
        return None
    try:
        return int(key)
    except ValueError:
        return None


def resolve_index(desc: TypeDescriptor, key: str, ignore_case: bool) -> Accessor | None:
    """Positional lookup for keys like ``"0"`` or ``"12"``.

    Declines non-numeric keys so member lookup can try them. The accessor
    checks the index against the live length, so an out-of-range index
    reads as ``UNDEFINED`` rather than raising ``IndexError``.
    """
    index = parse_index(key)
    if index is None:
        return None

    def get_index(instance: Any) -> Any:
        if index < len(instance):
            return instance[index]
        return UNDEFINED

    return get_index
