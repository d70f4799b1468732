"""Flattened member tables for structured types.

A member table maps ``name.casefold()`` to every public member of a class
(across its full MRO) whose name folds to that key. Members are:

- annotated attributes (dataclass fields, plain annotations)
- plain class-level values, read from the instance so that an instance
  assignment overrides the class default
- ``ClassVar`` annotations (static members, read from the class)
- properties and other data descriptors
- ``__slots__`` entries

Methods, nested classes, and names starting with ``_`` are not members.

Tables are built once per class and cached. A name redefined in a subclass
is one member (the most derived definition wins), so only members that
differ by case can share a table entry.

Thread-Safety:
Tables are read-only mappings; the cache is ``functools.lru_cache``.

"""

from __future__ import annotations

import inspect
import types
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from functools import cached_property, lru_cache
from typing import Any, ClassVar, Literal, get_origin

from mustang._types import Accessor
from mustang.helpers import UNDEFINED

MemberKind = Literal["field", "property", "static"]


@dataclass(frozen=True, slots=True)
class Member:
    """A single readable member of a class.

    Attributes:
        name: Exact member name
        kind: "field" (instance attribute), "property" (data descriptor),
            or "static" (``ClassVar``)
        owner: Class in the MRO that declares the member
    """

    name: str
    kind: MemberKind
    owner: type

    @property
    def is_static(self) -> bool:
        return self.kind == "static"

    def reader(self, cls: type) -> Accessor:
        """Build an extraction procedure reading this member.

        Static members are read from ``cls``; instance members from the
        instance passed at call time. A declared attribute that is not set
        on the instance reads as ``UNDEFINED``.
        """
        name = self.name
        if self.is_static:

            def read_static(instance: Any) -> Any:
                return getattr(cls, name, UNDEFINED)

            return read_static

        def read_member(instance: Any) -> Any:
            try:
                return getattr(instance, name)
            except AttributeError:
                return UNDEFINED

        return read_member


def instance_attribute_reader(name: str) -> Accessor:
    """Extraction procedure for an attribute no class declares.

    Reads the instance ``__dict__`` only, so class-level methods never
    leak through. Instances without a ``__dict__`` read as ``UNDEFINED``.
    """

    def read_instance_attribute(instance: Any) -> Any:
        try:
            return vars(instance)[name]
        except (TypeError, KeyError):
            return UNDEFINED

    return read_instance_attribute


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _is_classvar(annotation: Any) -> bool:
    # String annotations come from `from __future__ import annotations`
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def _attribute_kind(value: Any) -> MemberKind | None:
    """Classify a class-level attribute, or None if it is not a member."""
    if isinstance(value, (staticmethod, classmethod, type)):
        return None
    if isinstance(value, types.MemberDescriptorType):
        return "field"
    if isinstance(value, (property, cached_property)):
        return "property"
    value_type = type(value)
    if hasattr(value_type, "__get__"):
        # Data descriptors read like properties; functions and other
        # non-data descriptors are methods.
        if hasattr(value_type, "__set__") or hasattr(value_type, "__delete__"):
            return "property"
        return None
    if callable(value):
        return None
    # A class-level default; instances may shadow it
    return "field"


def _own_annotations(klass: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(klass)
    except NameError:
        # Lazily evaluated annotations with unresolved forward references
        import annotationlib

        return annotationlib.get_annotations(klass, format=annotationlib.Format.STRING)


def _declared_members(klass: type) -> Iterator[Member]:
    """Yield members declared directly on ``klass`` (not inherited)."""
    annotations = _own_annotations(klass)
    for name, annotation in annotations.items():
        if _is_public(name):
            kind: MemberKind = "static" if _is_classvar(annotation) else "field"
            yield Member(name, kind, klass)

    for name, value in vars(klass).items():
        if not _is_public(name) or name in annotations:
            continue
        kind = _attribute_kind(value)
        if kind is not None:
            yield Member(name, kind, klass)


@lru_cache(maxsize=1024)
def member_table(cls: type) -> Mapping[str, tuple[Member, ...]]:
    """Build the case-folded member table for ``cls``.

    Walks the MRO from ``object`` down to ``cls`` so that derived
    definitions replace inherited ones under the same exact name.

    Returns:
        Read-only mapping of folded name -> members whose names fold to it,
        in declaration order.
    """
    by_name: dict[str, Member] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for found in _declared_members(klass):
            by_name[found.name] = found

    folded: dict[str, list[Member]] = {}
    for name, found in by_name.items():
        folded.setdefault(name.casefold(), []).append(found)
    return types.MappingProxyType({key: tuple(group) for key, group in folded.items()})


def find_members(cls: type, key: str) -> tuple[Member, ...]:
    """All members of ``cls`` whose name matches ``key`` ignoring case."""
    return member_table(cls).get(key.casefold(), ())
