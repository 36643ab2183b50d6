"""Tests for SpecificationFactory (dict / JSON round trips and validation)."""

from __future__ import annotations

import json

import pytest

from solid_specifications import (
    AndSpecification,
    BaseSpecification,
    Color,
    ColorSpecification,
    NotSpecification,
    OrSpecification,
    PredicateSpecification,
    Product,
    Size,
    SizeSpecification,
    SpecificationFactory,
    SpecificationNotSerializableError,
    UnknownSpecificationKindError,
    ValidationError,
    filter_items,
)

# -- from_dict ---------------------------------------------------------------


def test_leaf_from_dict(registry):
    spec = SpecificationFactory.from_dict(
        {"kind": "color", "value": "green"}, registry=registry
    )
    assert spec == ColorSpecification(Color.GREEN)


def test_and_from_dict(registry, products: list[Product]):
    data = {
        "op": "and",
        "conditions": [
            {"kind": "color", "value": "green"},
            {"kind": "size", "value": "large"},
        ],
    }
    spec = SpecificationFactory.from_dict(data, registry=registry)
    assert isinstance(spec, AndSpecification)
    assert [p.name for p in filter_items(products, spec)] == ["Tree"]
    assert spec.to_dict() == data


def test_many_conditions_fold_left(registry):
    data = {
        "op": "or",
        "conditions": [
            {"kind": "color", "value": "red"},
            {"kind": "color", "value": "green"},
            {"kind": "color", "value": "blue"},
        ],
    }
    spec = SpecificationFactory.from_dict(data, registry=registry)
    assert isinstance(spec, OrSpecification)
    assert isinstance(spec.first, OrSpecification)
    assert spec.second == ColorSpecification(Color.BLUE)


def test_single_condition_is_unwrapped(registry):
    spec = SpecificationFactory.from_dict(
        {"op": "and", "conditions": [{"kind": "size", "value": "small"}]},
        registry=registry,
    )
    assert spec == SizeSpecification(Size.SMALL)


def test_not_from_dict(registry, house: Product):
    spec = SpecificationFactory.from_dict(
        {"op": "NOT", "conditions": [{"kind": "color", "value": "green"}]},
        registry=registry,
    )
    assert isinstance(spec, NotSpecification)
    assert spec.is_satisfied_by(house) is True


def test_round_trip_through_to_dict(registry):
    original = (
        ColorSpecification(Color.GREEN) & ~SizeSpecification(Size.SMALL)
    ) | ColorSpecification(Color.BLUE)
    rebuilt = SpecificationFactory.from_dict(original.to_dict(), registry=registry)
    assert rebuilt == original


def test_custom_kind_via_registration(registry, products: list[Product]):
    class NameSpecification(BaseSpecification[Product]):
        def __init__(self, name: str) -> None:
            self.name = name

        def is_satisfied_by(self, candidate: Product) -> bool:
            return candidate.name == self.name

    registry.register("name", NameSpecification)
    spec = SpecificationFactory.from_dict(
        {"kind": "name", "value": "House"}, registry=registry
    )
    assert [p.name for p in filter_items(products, spec)] == ["House"]


# -- errors ------------------------------------------------------------------


def test_unknown_kind_raises_with_suggestion(registry):
    with pytest.raises(UnknownSpecificationKindError) as exc:
        SpecificationFactory.from_dict({"kind": "colour", "value": "red"}, registry=registry)
    assert "color" in exc.value.suggestions


def test_invalid_enum_value_raises_validation_error(registry):
    with pytest.raises(ValidationError) as exc:
        SpecificationFactory.from_dict(
            {"op": "and", "conditions": [{"kind": "color", "value": "purple"}]},
            registry=registry,
        )
    assert exc.value.path == "<root>.conditions[0]"


def test_missing_value_raises(registry):
    with pytest.raises(ValidationError, match="missing 'value'"):
        SpecificationFactory.from_dict({"kind": "color"}, registry=registry)


def test_unknown_operator_raises(registry):
    with pytest.raises(ValidationError, match="unknown logical operator"):
        SpecificationFactory.from_dict(
            {"op": "xor", "conditions": [{"kind": "color", "value": "red"}]},
            registry=registry,
        )


def test_not_with_two_conditions_raises(registry):
    data = {
        "op": "not",
        "conditions": [
            {"kind": "color", "value": "red"},
            {"kind": "size", "value": "large"},
        ],
    }
    with pytest.raises(ValidationError, match="exactly one"):
        SpecificationFactory.from_dict(data, registry=registry)


@pytest.mark.parametrize(
    ("node", "fragment"),
    [
        ({"kind": "size"}, "missing 'value'"),
        ({"op": "xor", "conditions": [{"kind": "size", "value": "large"}]}, "xor"),
        ({"op": "or", "conditions": []}, "at least one condition"),
        (
            {
                "op": "not",
                "conditions": [
                    {"kind": "size", "value": "large"},
                    {"kind": "color", "value": "red"},
                ],
            },
            "exactly one",
        ),
    ],
)
def test_structural_error_reports_nested_path(registry, node, fragment):
    data = {"op": "and", "conditions": [{"kind": "color", "value": "red"}, node]}
    with pytest.raises(ValidationError) as exc:
        SpecificationFactory.from_dict(data, registry=registry)
    assert exc.value.path == "<root>.conditions[1]"
    assert fragment in exc.value.message
    assert str(exc.value).startswith("<root>.conditions[1]: ")


# -- from_json ---------------------------------------------------------------


def test_from_json(registry, apple: Product):
    text = json.dumps({"kind": "size", "value": "small"})
    spec = SpecificationFactory.from_json(text, registry=registry)
    assert spec.is_satisfied_by(apple) is True


def test_from_json_invalid(registry):
    with pytest.raises(ValidationError, match="Invalid JSON"):
        SpecificationFactory.from_json("{not json", registry=registry)


def test_from_json_non_object(registry):
    with pytest.raises(ValidationError, match="must be an object"):
        SpecificationFactory.from_json("[1, 2]", registry=registry)


# -- validate ----------------------------------------------------------------


def test_validate_valid():
    data = {"op": "and", "conditions": [{"kind": "color", "value": "red"}]}
    assert SpecificationFactory.validate(data) == []


def test_validate_collects_all_errors():
    data = {
        "op": "or",
        "conditions": [
            {"value": "red"},
            "not a dict",
            {"op": "and", "conditions": []},
        ],
    }
    errors = SpecificationFactory.validate(data)
    assert len(errors) == 3
    assert errors[0].startswith("<root>.conditions[0]")
    assert "expected dict, got str" in errors[1]
    assert "at least one condition" in errors[2]


def test_validate_with_registry_checks_kinds(registry):
    errors = SpecificationFactory.validate({"kind": "weight", "value": 3}, registry=registry)
    assert errors == ["<root>: unknown kind 'weight'"]


def test_validate_non_dict():
    assert SpecificationFactory.validate(["x"]) == ["<root>: expected dict, got list"]


# -- to_dict -----------------------------------------------------------------


def test_predicate_specification_is_not_serializable():
    spec = ColorSpecification(Color.RED) & PredicateSpecification(lambda _: True)
    with pytest.raises(SpecificationNotSerializableError):
        spec.to_dict()
