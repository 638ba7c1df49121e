"""Immutable passability grid."""

from __future__ import annotations

from collections.abc import Mapping, Set
from dataclasses import dataclass
from typing import Iterable, Sequence

from .coords import Coord, in_bounds, to_index
from .errors import InvalidArgumentError


PASSABLE = 1


@dataclass(frozen=True)
class Grid:
    """Row-major field of cell flags. A value of ``1`` is traversable."""

    cells: bytes
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidArgumentError(
                f"grid dimensions must be positive, got {self.width}x{self.height}"
            )
        if isinstance(self.cells, (int, str, Set, Mapping)):
            raise InvalidArgumentError("grid cells must be a sequence of byte values")
        try:
            cells = bytes(self.cells)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"grid cells must be byte values: {exc}") from exc
        if len(cells) != self.width * self.height:
            raise InvalidArgumentError(
                f"grid has {len(cells)} cells, expected {self.width * self.height}"
            )
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "cells", cells)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_rows(cls, rows: Sequence[Iterable[int]]) -> "Grid":
        """Build a grid from a list of equal-length rows."""

        materialised = [list(row) for row in rows]
        if not materialised or not materialised[0]:
            raise InvalidArgumentError("grid must have at least one row and column")
        width = len(materialised[0])
        if any(len(row) != width for row in materialised):
            raise InvalidArgumentError("all grid rows must have the same length")
        flat = [value for row in materialised for value in row]
        return cls(flat, width, len(materialised))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        return self.width * self.height

    def contains(self, pos: Coord) -> bool:
        """Return ``True`` if ``pos`` lies on the grid."""
        return in_bounds(self.width, self.height, pos[0], pos[1])

    def index_of(self, pos: Coord) -> int:
        """Return the cell index of ``pos``, raising if it is off the grid."""
        if not self.contains(pos):
            raise InvalidArgumentError(
                f"{pos} is outside the {self.width}x{self.height} grid"
            )
        return to_index(self.width, pos[0], pos[1])

    def is_passable(self, index: int) -> bool:
        return self.cells[index] == PASSABLE


__all__ = ["Grid", "PASSABLE"]
