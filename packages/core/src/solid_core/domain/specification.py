"""Specification pattern primitives."""

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T", contravariant=True)


@runtime_checkable
class ISpecification(Protocol[T]):
    """
    Protocol for the Specification pattern.

    A specification is a pure boolean test over a candidate. Anything
    exposing ``is_satisfied_by`` qualifies; no base class is required.
    """

    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check whether *candidate* satisfies this specification.

        Must be deterministic for a given candidate state and free of
        side effects.
        """
        ...
