"""Shared fixtures for specifications tests."""

from __future__ import annotations

import pytest

from solid_specifications import Color, Product, Size, build_default_registry


@pytest.fixture
def registry():
    """Default product specification registry for the factory."""
    return build_default_registry()


@pytest.fixture
def apple() -> Product:
    return Product(name="Apple", color=Color.GREEN, size=Size.SMALL)


@pytest.fixture
def tree() -> Product:
    return Product(name="Tree", color=Color.GREEN, size=Size.LARGE)


@pytest.fixture
def house() -> Product:
    return Product(name="House", color=Color.BLUE, size=Size.LARGE)


@pytest.fixture
def products(apple: Product, tree: Product, house: Product) -> list[Product]:
    return [apple, tree, house]
