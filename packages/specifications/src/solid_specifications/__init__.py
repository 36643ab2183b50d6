from .base import (
    AndSpecification,
    BaseSpecification,
    NotSpecification,
    OrSpecification,
    PredicateSpecification,
    and_,
    is_satisfied,
    not_,
    or_,
)
from .exceptions import (
    SpecificationError,
    SpecificationNotSerializableError,
    UnknownSpecificationKindError,
    ValidationError,
)
from .factory import SpecificationFactory
from .filter import IFilter, SpecificationFilter, filter_items
from .options import FilterOptions
from .products import (
    Color,
    ColorSpecification,
    Product,
    Size,
    SizeSpecification,
    build_default_registry,
)
from .registry import SpecificationRegistry

__all__ = [
    # Core types
    "BaseSpecification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "PredicateSpecification",
    # Functional API
    "is_satisfied",
    "and_",
    "or_",
    "not_",
    # Filtering
    "IFilter",
    "SpecificationFilter",
    "filter_items",
    "FilterOptions",
    # Product domain
    "Color",
    "Size",
    "Product",
    "ColorSpecification",
    "SizeSpecification",
    # Serialisation
    "SpecificationFactory",
    "SpecificationRegistry",
    "build_default_registry",
    # Exceptions
    "SpecificationError",
    "ValidationError",
    "UnknownSpecificationKindError",
    "SpecificationNotSerializableError",
]
