"""
Specification-driven filtering.

Filters only ever call ``is_satisfied_by``; they never inspect which kind
of specification they were given. New specification kinds therefore work
with every filter without modifying it.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from .options import FilterOptions

if TYPE_CHECKING:
    from collections.abc import Iterable

    from solid_core.domain.specification import ISpecification

logger = logging.getLogger("solid.specifications.filter")

T = TypeVar("T")


class IFilter(ABC, Generic[T]):
    """Interface for filtering a collection of items with a specification."""

    @abstractmethod
    def filter(
        self,
        items: Iterable[T],
        specification: ISpecification[T],
    ) -> list[T]:
        """
        Return the items satisfying *specification*.

        Args:
            items: Candidates to test. Not mutated.
            specification: Any object exposing ``is_satisfied_by``.

        Returns:
            A new list of matching items.
        """
        ...


class SpecificationFilter(IFilter[T]):
    """
    Stable linear-scan filter.

    Returns the ordered sub-sequence of items satisfying the
    specification, shaped by the configured :class:`FilterOptions`.
    """

    def __init__(self, options: FilterOptions | None = None) -> None:
        self._options = options if options is not None else FilterOptions()

    @property
    def options(self) -> FilterOptions:
        return self._options

    def filter(
        self,
        items: Iterable[T],
        specification: ISpecification[T],
    ) -> list[T]:
        candidates = list(items)
        matches = [item for item in candidates if specification.is_satisfied_by(item)]
        if self._options.is_paginated:
            matches = self._options.apply(matches)
        logger.debug(
            "Filter kept %d of %d items with %r",
            len(matches),
            len(candidates),
            specification,
        )
        return matches


def filter_items(
    items: Iterable[T],
    specification: ISpecification[T],
    *,
    options: FilterOptions | None = None,
) -> list[T]:
    """
    Return the items satisfying *specification*, in input order.

    Shortcut for ``SpecificationFilter(options).filter(items, specification)``.
    """
    return SpecificationFilter(options).filter(items, specification)
