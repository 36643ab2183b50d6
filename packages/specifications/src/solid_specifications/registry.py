"""
Registry of leaf specification builders.

Maps a leaf ``kind`` name (as it appears in serialised specifications)
to a callable building the specification from its ``value``. New kinds
are added by registration; nothing else needs to change.

Usage::

    registry = SpecificationRegistry()
    registry.register("color", ColorSpecification.from_value)

    spec = registry.build("color", "green")
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from solid_core.domain.specification import ISpecification

from .exceptions import UnknownSpecificationKindError

logger = logging.getLogger("solid.specifications.registry")

SpecificationBuilderFunc = Callable[[Any], ISpecification[Any]]


class SpecificationRegistry:
    """Registry of leaf specification builders keyed by kind."""

    def __init__(self) -> None:
        self._builders: dict[str, SpecificationBuilderFunc] = {}

    # -- registration --------------------------------------------------------

    def register(self, kind: str, builder: SpecificationBuilderFunc) -> None:
        """Register (or replace) the builder for *kind*."""
        if kind in self._builders:
            logger.debug("Replacing builder for specification kind '%s'", kind)
        self._builders[kind] = builder

    def unregister(self, kind: str) -> None:
        """Remove a kind from the registry."""
        self._builders.pop(kind, None)

    # -- look-up -------------------------------------------------------------

    def get(self, kind: str) -> SpecificationBuilderFunc | None:
        """Return the registered builder or ``None``."""
        return self._builders.get(kind)

    def has(self, kind: str) -> bool:
        return kind in self._builders

    @property
    def kinds(self) -> set[str]:
        return set(self._builders.keys())

    # -- construction shortcut -----------------------------------------------

    def build(self, kind: str, value: Any) -> ISpecification[Any]:
        """
        Look up the builder for *kind* and call it with *value*.

        Raises:
            UnknownSpecificationKindError: If *kind* is not registered.
        """
        builder = self.get(kind)
        if builder is None:
            raise UnknownSpecificationKindError(kind, sorted(self._builders))
        return builder(value)
