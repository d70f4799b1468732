"""Member lookup: the fallback strategy for every type.

Finds the single field, property or static value whose name matches the
key, searching the whole MRO. Never declines: a type with no such member
gets an accessor that always reads ``UNDEFINED``.

Attributes assigned only in ``__init__`` are invisible to the member table.
For types whose instances carry a ``__dict__``, an undeclared public key
reads the instance ``__dict__`` by its exact name instead.
"""

from __future__ import annotations

from mustang._types import Accessor
from mustang.descriptors import TypeDescriptor
from mustang.exceptions import AmbiguousMemberError
from mustang.helpers import always_absent
from mustang.members import instance_attribute_reader


def resolve_member(desc: TypeDescriptor, key: str, ignore_case: bool) -> Accessor:
    """Accessor reading the member named ``key``.

    Candidates are matched ignoring case. An exact-case match is required
    unless ``ignore_case`` is set; a case-only match then reads as absent.
    Undeclared instance attributes are always matched by exact case.

    Raises:
        AmbiguousMemberError: Several members match ``key`` ignoring case,
            whether or not one of them matches exactly.
    """
    matches = desc.find_members(key)
    if not matches:
        if desc.has_instance_dict and not key.startswith("_"):
            return instance_attribute_reader(key)
        return always_absent
    if len(matches) > 1:
        raise AmbiguousMemberError(key, [found.name for found in matches], desc.name)

    found = matches[0]
    if ignore_case or found.name == key:
        return found.reader(desc.origin)
    return always_absent
