"""Three-way comparison helpers shared by the record comparators."""

from __future__ import annotations

from typing import Any, Optional


def three_way(left: Any, right: Any) -> int:
    """Return ``-1``, ``0`` or ``1`` as ``left`` is below, equal to or above ``right``."""
    return (left > right) - (left < right)


def three_way_optional(left: Optional[Any], right: Optional[Any]) -> int:
    """Like :func:`three_way` with ``None`` ordered before any present value."""
    if left is None or right is None:
        return (left is not None) - (right is not None)
    return three_way(left, right)


__all__ = ["three_way", "three_way_optional"]
