"""Root exception for the SOLID packages."""

from __future__ import annotations


class SolidError(Exception):
    """Root exception for every package in the toolkit.

    Package-level hierarchies derive from this so callers can catch
    all library errors with a single ``except`` clause.
    """
