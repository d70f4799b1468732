"""Container truthiness policy for sections.

A Mustache section over an iterable renders once per item. Mappings and
strings are iterable too, but a section over a mapping renders once with
the mapping as context, and a string is a single value.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from mustang.config import DEFAULT_CONFIG, ResolverConfig
from mustang.descriptors import describe
from mustang.helpers import is_absent


def excludes_section(tp: Any, config: ResolverConfig = DEFAULT_CONFIG) -> bool:
    """True if values of ``tp`` are never iterated as sections."""
    return issubclass(describe(tp).origin, config.section_blacklist)


def section_items(value: Any, config: ResolverConfig = DEFAULT_CONFIG) -> tuple[Any, ...]:
    """Contexts a section renders with, in order.

    - absent, None, or falsy: no contexts
    - iterable and not excluded: one context per item
    - anything else: the value itself, once
    """
    if value is None or is_absent(value) or not value:
        return ()
    if isinstance(value, Iterable) and not excludes_section(type(value), config):
        return tuple(value)
    return (value,)
