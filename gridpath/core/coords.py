"""Conversions between linear cell indices and ``(x, y)`` coordinates."""

from __future__ import annotations

from typing import Tuple

from .errors import InvalidArgumentError


Coord = Tuple[int, int]


def to_xy(width: int, index: int) -> Coord:
    """Return the ``(x, y)`` coordinate of ``index`` on a grid ``width`` wide."""

    if width <= 0:
        raise InvalidArgumentError("width must be positive")
    return index % width, index // width


def to_index(width: int, x: int, y: int) -> int:
    """Return the row-major index of ``(x, y)``. Bounds are not checked."""

    return width * y + x


def in_bounds(width: int, height: int, x: int, y: int) -> bool:
    return 0 <= x < width and 0 <= y < height


__all__ = ["Coord", "to_xy", "to_index", "in_bounds"]
