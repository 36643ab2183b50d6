"""
Build specification trees from dictionary / JSON representations.

Format::

    {"kind": "color", "value": "green"}                 # leaf
    {"op": "and", "conditions": [<node>, <node>, ...]}  # composite
    {"op": "not", "conditions": [<node>]}

Leaf kinds are resolved through a :class:`SpecificationRegistry`, so the
factory never needs to know about concrete specification classes.
"""

from __future__ import annotations

import json
import logging
from functools import reduce
from typing import TYPE_CHECKING, Any

from .base import AndSpecification, NotSpecification, OrSpecification
from .exceptions import UnknownSpecificationKindError, ValidationError

if TYPE_CHECKING:
    from solid_core.domain.specification import ISpecification

    from .registry import SpecificationRegistry

logger = logging.getLogger("solid.specifications.factory")

_LOGICAL_OPERATORS: frozenset[str] = frozenset({"and", "or", "not"})


class SpecificationFactory:
    """
    Factory for creating specifications from dictionary / JSON representations.

    Supports:
    - ``from_dict(data)``: parse a nested dict tree
    - ``from_json(text)``: parse a JSON string
    - ``validate(data)``: collect errors without constructing
    """

    # ------------------------------------------------------------------ #
    # Public API                                                          #
    # ------------------------------------------------------------------ #

    @staticmethod
    def from_dict(
        data: dict[str, Any],
        *,
        registry: SpecificationRegistry,
    ) -> ISpecification[Any]:
        """
        Create a specification tree from a dictionary.

        ``and`` / ``or`` nodes with more than two conditions are folded
        left into nested binary composites; a single condition is
        returned unwrapped.

        Raises:
            ValidationError: If the structure is malformed or a leaf
                value is rejected by its builder.
            UnknownSpecificationKindError: If a leaf kind is not registered.
        """
        SpecificationFactory._validate_node(data, path="<root>", registry=registry)
        spec = SpecificationFactory._build(data, path="<root>", registry=registry)
        logger.debug("Built specification %r", spec)
        return spec

    @staticmethod
    def from_json(
        text: str,
        *,
        registry: SpecificationRegistry,
    ) -> ISpecification[Any]:
        """Parse a JSON string and build a specification tree."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Invalid JSON: {exc}", path="<root>") from exc

        if not isinstance(data, dict):
            raise ValidationError(
                "Top-level JSON value must be an object",
                path="<root>",
            )
        return SpecificationFactory.from_dict(data, registry=registry)

    @staticmethod
    def validate(
        data: Any,
        *,
        registry: SpecificationRegistry | None = None,
    ) -> list[str]:
        """
        Validate a specification dict and return a list of error messages.

        Returns an empty list when the structure is valid. Leaf kinds are
        only checked when a *registry* is given.
        """
        errors: list[tuple[str, str]] = []
        SpecificationFactory._collect_errors(
            data, errors, path="<root>", registry=registry
        )
        return [f"{where}: {message}" for where, message in errors]

    # ------------------------------------------------------------------ #
    # Internal: recursive build                                          #
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build(
        data: dict[str, Any],
        *,
        path: str,
        registry: SpecificationRegistry,
    ) -> ISpecification[Any]:
        op = data.get("op")
        if op is None:
            return SpecificationFactory._build_leaf(data, path=path, registry=registry)

        op = op.lower()
        children = [
            SpecificationFactory._build(
                child, path=f"{path}.conditions[{idx}]", registry=registry
            )
            for idx, child in enumerate(data["conditions"])
        ]
        if op == "not":
            return NotSpecification(children[0])
        if op == "or":
            return reduce(OrSpecification, children)
        return reduce(AndSpecification, children)

    @staticmethod
    def _build_leaf(
        data: dict[str, Any],
        *,
        path: str,
        registry: SpecificationRegistry,
    ) -> ISpecification[Any]:
        try:
            return registry.build(data["kind"], data["value"])
        except ValueError as exc:
            raise ValidationError(
                f"Invalid value for '{data['kind']}': {exc}",
                path=path,
            ) from exc

    # ------------------------------------------------------------------ #
    # Internal: validation                                               #
    # ------------------------------------------------------------------ #

    @staticmethod
    def _validate_node(
        data: Any,
        *,
        path: str,
        registry: SpecificationRegistry,
    ) -> None:
        """Raise on first problem (fail-fast)."""
        errors: list[tuple[str, str]] = []
        SpecificationFactory._collect_errors(data, errors, path=path, registry=None)
        if errors:
            where, message = errors[0]
            raise ValidationError(message, path=where)
        SpecificationFactory._check_kinds(data, registry)

    @staticmethod
    def _check_kinds(data: dict[str, Any], registry: SpecificationRegistry) -> None:
        if "op" in data:
            for child in data["conditions"]:
                SpecificationFactory._check_kinds(child, registry)
            return
        kind = data["kind"]
        if not registry.has(kind):
            raise UnknownSpecificationKindError(kind, sorted(registry.kinds))

    @staticmethod
    def _collect_logical_errors(
        data: dict[str, Any],
        op: str,
        errors: list[tuple[str, str]],
        path: str,
        registry: SpecificationRegistry | None,
    ) -> None:
        conditions = data.get("conditions")
        if not isinstance(conditions, list):
            errors.append((path, f"logical '{op}' requires a 'conditions' list"))
            return
        if not conditions:
            errors.append((path, f"logical '{op}' requires at least one condition"))
            return
        if op == "not" and len(conditions) != 1:
            errors.append((path, "'not' requires exactly one condition"))
        for idx, child in enumerate(conditions):
            SpecificationFactory._collect_errors(
                child,
                errors,
                path=f"{path}.conditions[{idx}]",
                registry=registry,
            )

    @staticmethod
    def _collect_leaf_errors(
        data: dict[str, Any],
        errors: list[tuple[str, str]],
        path: str,
        registry: SpecificationRegistry | None,
    ) -> None:
        kind = data.get("kind")
        if not kind or not isinstance(kind, str):
            errors.append((path, "leaf requires a non-empty 'kind'"))
            return
        if "value" not in data:
            errors.append((path, f"leaf '{kind}' is missing 'value'"))
        if registry is not None and not registry.has(kind):
            errors.append((path, f"unknown kind '{kind}'"))

    @staticmethod
    def _collect_errors(
        data: Any,
        errors: list[tuple[str, str]],
        *,
        path: str,
        registry: SpecificationRegistry | None,
    ) -> None:
        """Recursive error collection (non-throwing)."""
        if not isinstance(data, dict):
            errors.append((path, f"expected dict, got {type(data).__name__}"))
            return

        if "op" not in data:
            SpecificationFactory._collect_leaf_errors(data, errors, path, registry)
            return

        op = data["op"]
        if not isinstance(op, str) or op.lower() not in _LOGICAL_OPERATORS:
            errors.append((path, f"unknown logical operator {op!r}"))
            return
        SpecificationFactory._collect_logical_errors(
            data, op.lower(), errors, path, registry
        )
