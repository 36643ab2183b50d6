"""
Product catalogue domain: the reference items and their specifications.

Usage::

    green_and_large = ColorSpecification(Color.GREEN) & SizeSpecification(
        Size.LARGE
    )
    filter_items(products, green_and_large)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from solid_core.domain.value_object import ValueObject

from .base import BaseSpecification
from .registry import SpecificationRegistry


class Color(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Size(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Product(ValueObject):
    """A catalogue item."""

    name: str
    color: Color
    size: Size


@dataclass(frozen=True)
class ColorSpecification(BaseSpecification[Product]):
    """Satisfied by products of the given colour."""

    kind: ClassVar[str] = "color"

    color: Color

    @classmethod
    def from_value(cls, value: Any) -> ColorSpecification:
        return cls(Color(value))

    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.color == self.color

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "value": self.color.value}


@dataclass(frozen=True)
class SizeSpecification(BaseSpecification[Product]):
    """Satisfied by products of the given size."""

    kind: ClassVar[str] = "size"

    size: Size

    @classmethod
    def from_value(cls, value: Any) -> SizeSpecification:
        return cls(Size(value))

    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.size == self.size

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "value": self.size.value}


def build_default_registry() -> SpecificationRegistry:
    """
    Create a registry with the product leaf specifications.

    Returns a fresh instance on every call so callers can register
    their own kinds without affecting each other.

    Example:
        >>> registry = build_default_registry()
        >>> sorted(registry.kinds)
        ['color', 'size']
    """
    registry = SpecificationRegistry()
    registry.register(ColorSpecification.kind, ColorSpecification.from_value)
    registry.register(SizeSpecification.kind, SizeSpecification.from_value)
    return registry
