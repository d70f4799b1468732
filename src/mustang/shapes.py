"""Shape classifier.

Maps a type to the ordered list of shapes it satisfies. The order is the
resolution priority; the resolver tries strategies in exactly this order
and stops at the first one that produces an accessor.
"""

from __future__ import annotations

from typing import Any

from mustang._types import Shape
from mustang.descriptors import TypeDescriptor, describe


def classify(tp: Any) -> tuple[Shape, ...]:
    """Return every shape ``tp`` satisfies, highest priority first.

    Dynamic types are kept out of both map shapes so that their own
    strategy is not masked. The dynamic strategy still uses a map-style
    lookup when the type declares string keys.

    ``PLAIN_OBJECT`` is always last, so the result is never empty.

    Example:
        >>> classify(list)
        (<Shape.INDEXABLE_LIST: 1>, <Shape.PLAIN_OBJECT: 5>)
        >>> classify(dict[str, Any])
        (<Shape.STRING_KEYED_MAP: 2>, <Shape.GENERIC_MAP: 3>, <Shape.PLAIN_OBJECT: 5>)
    """
    desc: TypeDescriptor = describe(tp)
    shapes: list[Shape] = []
    if desc.is_indexable:
        shapes.append(Shape.INDEXABLE_LIST)
    if desc.is_mapping and not desc.is_dynamic:
        if desc.declares_string_keys:
            shapes.append(Shape.STRING_KEYED_MAP)
        shapes.append(Shape.GENERIC_MAP)
    if desc.is_dynamic:
        shapes.append(Shape.DYNAMIC_OBJECT)
    shapes.append(Shape.PLAIN_OBJECT)
    return tuple(shapes)


def satisfies(tp: Any, shape: Shape) -> bool:
    """True if ``tp`` satisfies ``shape``."""
    return shape in classify(tp)
