"""Mustang — value-accessor resolution for compiled Mustache templates.

Given the type of a data value and a template key, Mustang decides *how*
to read that key and returns a pre-bound extraction procedure. The
template compiler resolves each key once and calls the procedure on every
render, with no per-render dispatch on type.

Quickstart:
    >>> from mustang import resolve, UNDEFINED
    >>> get_first = resolve(list, "0")
    >>> get_first(["a", "b"])
    'a'
    >>> get_first([]) is UNDEFINED
    True

Shapes (tried in this order):
1. **INDEXABLE_LIST**: non-text sequences, for integer keys
2. **STRING_KEYED_MAP**: mappings declared ``str`` -> ``Any``
3. **GENERIC_MAP**: any other mapping
4. **DYNAMIC_OBJECT**: namespaces, ``__getattr__`` classes, ``DynamicMembers``
5. **PLAIN_OBJECT**: member lookup across the MRO (always applies)

Missing Data:
Missing indices, keys and members are not errors. Procedures return the
``UNDEFINED`` sentinel, which renders as an empty string and is falsy.

Errors:
Only two conditions fail resolution, both raised while resolving:
- ``AmbiguousMemberError``: members differing only in case
- ``UnsupportedCaseInsensitiveDynamicError``: ignore_case on a dynamic type

Thread-Safety:
Configs are immutable, procedures only read the instance they are given,
and caches use copy-on-write. Resolution and rendering need no locks.

"""

from mustang._types import Accessor, Shape, Strategy
from mustang.cache import AccessorCache
from mustang.config import DEFAULT_CONFIG, DEFAULT_SECTION_BLACKLIST, ResolverConfig
from mustang.descriptors import DynamicMembers, TypeDescriptor, describe
from mustang.exceptions import (
    AmbiguousMemberError,
    ErrorCode,
    ResolutionError,
    UnsupportedCaseInsensitiveDynamicError,
)
from mustang.helpers import UNDEFINED, always_absent, is_absent
from mustang.members import Member, member_table
from mustang.resolver import Resolver, resolve
from mustang.sections import excludes_section, section_items
from mustang.shapes import classify, satisfies

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_SECTION_BLACKLIST",
    "UNDEFINED",
    "Accessor",
    "AccessorCache",
    "AmbiguousMemberError",
    "DynamicMembers",
    "ErrorCode",
    "Member",
    "ResolutionError",
    "Resolver",
    "ResolverConfig",
    "Shape",
    "Strategy",
    "TypeDescriptor",
    "UnsupportedCaseInsensitiveDynamicError",
    "__version__",
    "always_absent",
    "classify",
    "describe",
    "excludes_section",
    "is_absent",
    "member_table",
    "resolve",
    "satisfies",
    "section_items",
]


# Free-threading declaration (PEP 703)
def __getattr__(name: str) -> object:
    """Module-level getattr for the free-threading declaration."""
    if name == "_Py_mod_gil":
        # 0 = Py_MOD_GIL_NOT_USED
        return 0
    raise AttributeError(f"module 'mustang' has no attribute {name!r}")
