"""Orthogonal neighbour enumeration."""

from __future__ import annotations

from typing import List

from .coords import to_index, to_xy


def neighbors(index: int, width: int, height: int) -> List[int]:
    """Return the in-bounds cardinal neighbours of ``index``.

    Emitted in the order left, right, up, down. Passability and closed-list
    membership are left to the caller.
    """

    x, y = to_xy(width, index)
    result: List[int] = []
    if x > 0:
        result.append(to_index(width, x - 1, y))
    if x < width - 1:
        result.append(to_index(width, x + 1, y))
    if y > 0:
        result.append(to_index(width, x, y - 1))
    if y < height - 1:
        result.append(to_index(width, x, y + 1))
    return result


__all__ = ["neighbors"]
