"""Distance heuristic for 4-neighbour grids."""

from __future__ import annotations

from .coords import to_xy


def manhattan(x0: int, y0: int, x1: int, y1: int) -> int:
    """Return the Manhattan distance between ``(x0, y0)`` and ``(x1, y1)``.

    Admissible and consistent when only orthogonal moves are allowed.
    """

    return abs(x1 - x0) + abs(y1 - y0)


def manhattan_index(width: int, i: int, j: int) -> int:
    """Return the Manhattan distance between cell indices ``i`` and ``j``."""

    x0, y0 = to_xy(width, i)
    x1, y1 = to_xy(width, j)
    return manhattan(x0, y0, x1, y1)


__all__ = ["manhattan", "manhattan_index"]
