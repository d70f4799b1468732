"""Shape tags and shared type aliases for Mustang.

Shapes are capability classifications of a type. Their integer value is
their resolution priority: lower values are tried first.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mustang.descriptors import TypeDescriptor


class Shape(IntEnum):
    """Capability shapes, in resolution priority order."""

    INDEXABLE_LIST = 1
    STRING_KEYED_MAP = 2
    GENERIC_MAP = 3
    DYNAMIC_OBJECT = 4
    PLAIN_OBJECT = 5


# Extraction procedure: reads one key out of an instance.
# Returns the value, or UNDEFINED when the key is absent.
Accessor = Callable[[Any], Any]

# Strategy: (descriptor, key, ignore_case) -> accessor, or None to decline.
# Raising a ResolutionError fails resolution for the key.
Strategy = Callable[["TypeDescriptor", str, bool], Accessor | None]
