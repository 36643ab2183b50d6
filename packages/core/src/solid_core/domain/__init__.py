"""Domain primitives: value objects and the specification capability."""

from __future__ import annotations

from .specification import ISpecification
from .value_object import ValueObject

__all__: list[str] = [
    "ISpecification",
    "ValueObject",
]
