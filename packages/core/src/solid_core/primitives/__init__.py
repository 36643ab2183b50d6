"""Cross-cutting primitives."""

from __future__ import annotations

from .exceptions import SolidError

__all__: list[str] = ["SolidError"]
