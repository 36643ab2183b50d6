"""
Composable specifications.

``BaseSpecification`` gives any predicate the ``&``, ``|`` and ``~``
operators plus their named forms. Composites hold strong references to
their operands, so an operand lives at least as long as every composite
built from it. All specifications here are frozen dataclasses and cannot
be changed after construction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .exceptions import SpecificationNotSerializableError

if TYPE_CHECKING:
    from collections.abc import Callable

    from solid_core.domain.specification import ISpecification

T = TypeVar("T", contravariant=True)


class BaseSpecification(ABC, Generic[T]):
    """Base class for specifications with logic operator support."""

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def __and__(self, other: ISpecification[T]) -> AndSpecification[T]:
        return AndSpecification(self, other)

    def __or__(self, other: ISpecification[T]) -> OrSpecification[T]:
        return OrSpecification(self, other)

    def __invert__(self) -> NotSpecification[T]:
        return NotSpecification(self)

    def and_(self, other: ISpecification[T]) -> AndSpecification[T]:
        """Combine with another specification using logical AND."""
        return AndSpecification(self, other)

    def or_(self, other: ISpecification[T]) -> OrSpecification[T]:
        """Combine with another specification using logical OR."""
        return OrSpecification(self, other)

    def not_(self) -> NotSpecification[T]:
        return NotSpecification(self)

    def to_dict(self) -> dict[str, Any]:
        """
        Return a dictionary representation of the specification.

        Raises:
            SpecificationNotSerializableError: If the subclass does not
                override this method.
        """
        raise SpecificationNotSerializableError(self)


@dataclass(frozen=True)
class AndSpecification(BaseSpecification[T]):
    """
    Logical AND of exactly two specifications.

    ``second`` is only evaluated when ``first`` is satisfied.
    """

    first: ISpecification[T]
    second: ISpecification[T]

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.first.is_satisfied_by(candidate) and self.second.is_satisfied_by(
            candidate
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "and",
            "conditions": [_serialize(self.first), _serialize(self.second)],
        }


@dataclass(frozen=True)
class OrSpecification(BaseSpecification[T]):
    """
    Logical OR of exactly two specifications.

    ``second`` is only evaluated when ``first`` is not satisfied.
    """

    first: ISpecification[T]
    second: ISpecification[T]

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.first.is_satisfied_by(candidate) or self.second.is_satisfied_by(
            candidate
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "or",
            "conditions": [_serialize(self.first), _serialize(self.second)],
        }


@dataclass(frozen=True)
class NotSpecification(BaseSpecification[T]):
    """Logical NOT of a specification."""

    specification: ISpecification[T]

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.specification.is_satisfied_by(candidate)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "not",
            "conditions": [_serialize(self.specification)],
        }


@dataclass(frozen=True)
class PredicateSpecification(BaseSpecification[T]):
    """Adapts a plain ``candidate -> bool`` callable into a specification."""

    func: Callable[[T], bool]
    name: str = field(default="", compare=False)

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self.func(candidate))

    def __repr__(self) -> str:
        label = self.name or getattr(self.func, "__name__", "predicate")
        return f"PredicateSpecification({label})"


# -- functional API ----------------------------------------------------------


def is_satisfied(specification: ISpecification[T], candidate: T) -> bool:
    """Evaluate *specification* against *candidate*."""
    return specification.is_satisfied_by(candidate)


def and_(first: ISpecification[T], second: ISpecification[T]) -> AndSpecification[T]:
    """Build the conjunction of two specifications."""
    return AndSpecification(first, second)


def or_(first: ISpecification[T], second: ISpecification[T]) -> OrSpecification[T]:
    """Build the disjunction of two specifications."""
    return OrSpecification(first, second)


def not_(specification: ISpecification[T]) -> NotSpecification[T]:
    """Build the negation of a specification."""
    return NotSpecification(specification)


def _serialize(specification: ISpecification[Any]) -> dict[str, Any]:
    to_dict = getattr(specification, "to_dict", None)
    if to_dict is None:
        raise SpecificationNotSerializableError(specification)
    result: dict[str, Any] = to_dict()
    return result
