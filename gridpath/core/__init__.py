"""core package."""

from .coords import Coord, in_bounds, to_index, to_xy
from .errors import BufferOverflowError, InvalidArgumentError, PathfindingError
from .grid import PASSABLE, Grid
from .heuristic import manhattan, manhattan_index
from .neighbors import neighbors

__all__ = [
    "Coord",
    "to_xy",
    "to_index",
    "in_bounds",
    "Grid",
    "PASSABLE",
    "manhattan",
    "manhattan_index",
    "neighbors",
    "PathfindingError",
    "InvalidArgumentError",
    "BufferOverflowError",
]
