"""Exceptions for Mustang accessor resolution.

Exception Hierarchy:
ResolutionError (base)
├── AmbiguousMemberError                     # Several members match a key ignoring case
└── UnsupportedCaseInsensitiveDynamicError   # ignore_case on a dynamic type

Both errors stop resolution of the offending key immediately; no other
shape is tried. Missing list indices, map keys, and members are *not*
errors: their extraction procedures return ``UNDEFINED``.

Example:
    ```
    M-RES-001: Ambiguous match for key 'name' on Person
      Candidates: Name, name
      Hint: Rename one of the members so they differ by more than case
    ```

"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from mustang import terminal


class ErrorCode(Enum):
    """Searchable error codes for resolution errors.

    Format: M-{CATEGORY}-{NUMBER}
    Categories: RES (resolution)
    """

    AMBIGUOUS_MEMBER = "M-RES-001"
    CASE_INSENSITIVE_DYNAMIC = "M-RES-002"

    @property
    def category(self) -> str:
        """Error category (e.g., 'resolution')."""
        prefix = self.value.split("-")[1]
        return {"RES": "resolution"}.get(prefix, "unknown")


class ResolutionError(Exception):
    """Base exception for keys that cannot be resolved.

    Raised while building an extraction procedure, never while running
    one. Catch this to handle every resolution failure at once:

        >>> try:
        ...     accessor = resolve(Person, "name", ignore_case=True)
        ... except ResolutionError as e:
        ...     log.error(e.format_compact())

    Attributes:
        key: The key being resolved.
        type_name: Name of the type the key was resolved against.
        code: ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def __init__(self, message: str, key: str, type_name: str | None = None):
        self.message = message
        self.key = key
        self.type_name = type_name
        super().__init__(message)

    def _details(self) -> list[str]:
        return []

    def _hint(self) -> str | None:
        return None

    def format_compact(self) -> str:
        """Format error as a structured, human-readable summary.

        Returns:
            Multi-line string with error code, message, details and hint.
        """
        parts = [terminal.format_error_header(self.code.value if self.code else None, self.message)]
        parts.extend(f"  {line}" for line in self._details())
        hint_text = self._hint()
        if hint_text:
            parts.append(f"  {terminal.hint('Hint:')} {hint_text}")
        return "\n".join(parts)


class AmbiguousMemberError(ResolutionError):
    """More than one member matches a key when case is ignored.

    Raised by member lookup when a type declares members that differ only
    in case (``Name`` and ``name``). The resolver cannot pick one, so the
    template author has to rename or disambiguate.
    """

    code: ErrorCode | None = ErrorCode.AMBIGUOUS_MEMBER

    def __init__(self, key: str, candidates: Sequence[str], type_name: str | None = None):
        self.candidates = tuple(candidates)
        where = f" on {terminal.type_name(type_name)}" if type_name else ""
        super().__init__(f"Ambiguous match found when looking up key: '{key}'{where}", key, type_name)

    def _details(self) -> list[str]:
        names = ", ".join(terminal.member(name) for name in self.candidates)
        return [f"{terminal.dim_text('Candidates:')} {names}"]

    def _hint(self) -> str | None:
        return "Rename one of the members so they differ by more than case"


class UnsupportedCaseInsensitiveDynamicError(ResolutionError):
    """Case-insensitive lookup was requested on a dynamically-shaped type.

    Dynamic member sets cannot be enumerated, so there is nothing to
    compare a key against ignoring case.
    """

    code: ErrorCode | None = ErrorCode.CASE_INSENSITIVE_DYNAMIC

    def __init__(self, key: str, type_name: str | None = None):
        where = f" on {terminal.type_name(type_name)}" if type_name else ""
        super().__init__(f"Dynamic value lookup cannot ignore case (key '{key}'{where})", key, type_name)

    def _hint(self) -> str | None:
        return "Resolve keys on dynamic objects with ignore_case=False"
