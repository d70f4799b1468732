"""Runtime helpers shared by every extraction procedure.

Thread-Safety:
All objects here are stateless and safe for concurrent use.

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class _Undefined:
    """Sentinel for an absent key.

    Returned by extraction procedures when the key is not found (missing
    list index, missing map key, missing member). Stringifies as ``""`` so
    rendered output is empty, is falsy, and iterates as an empty sequence,
    so a missing value behaves like empty data in sections.

    A stored ``None`` is *not* absent: procedures return it unchanged.
    """

    __slots__ = ()

    def __str__(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "Undefined"

    def __bool__(self) -> bool:
        return False

    def __len__(self) -> int:
        return 0

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Undefined)

    def __hash__(self) -> int:
        return hash(_Undefined)


UNDEFINED = _Undefined()


def is_absent(value: Any) -> bool:
    """True if ``value`` is the absent sentinel."""
    return isinstance(value, _Undefined)


def always_absent(instance: Any) -> Any:
    """Extraction procedure for keys that can never be found."""
    return UNDEFINED
