"""
Specification exception hierarchy with fuzzy-match suggestions.

All exceptions inherit from ``SpecificationError`` and provide
``to_dict()`` for API-friendly error responses.

The evaluation path (``is_satisfied``, ``and_``, ``filter_items``) never
raises any of these; they come from serialisation and construction.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any

from solid_core.primitives.exceptions import SolidError


class SpecificationError(SolidError):
    """Base exception for all specification errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(SpecificationError):
    """
    A serialised specification is malformed.

    ``path`` locates the offending node, e.g. ``<root>.conditions[1]``,
    and prefixes the string form when present.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": self.message,
            "path": self.path,
        }


class UnknownSpecificationKindError(SpecificationError):
    """
    No builder is registered for the requested leaf kind.

    Provides fuzzy-matched suggestions for likely intended kinds.
    """

    def __init__(self, kind: str, known_kinds: list[str]) -> None:
        self.kind = kind
        self.known_kinds = known_kinds
        self.suggestions = get_close_matches(kind, known_kinds, n=3, cutoff=0.6)

        message = f"Unknown specification kind: '{kind}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        if known_kinds:
            message += f" Known kinds: {', '.join(sorted(known_kinds))}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNKNOWN_SPECIFICATION_KIND",
            "kind": self.kind,
            "suggestions": self.suggestions,
            "known_kinds": sorted(self.known_kinds),
        }


class SpecificationNotSerializableError(SpecificationError):
    """The specification has no dictionary representation."""

    def __init__(self, specification: object) -> None:
        self.specification_type = type(specification).__name__
        super().__init__(
            f"Specification '{self.specification_type}' does not support to_dict()"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "SPECIFICATION_NOT_SERIALIZABLE",
            "specification": self.specification_type,
        }
