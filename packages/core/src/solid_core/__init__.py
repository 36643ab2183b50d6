"""solid-core: Foundation primitives shared by the SOLID packages.

Pure-Python domain building blocks. pydantic backs the value objects.
"""

from __future__ import annotations

from .domain import ISpecification, ValueObject
from .primitives import SolidError

__all__: list[str] = [
    "ISpecification",
    "SolidError",
    "ValueObject",
]
