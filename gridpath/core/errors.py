"""Exception types raised by the pathfinding core."""

from __future__ import annotations


class PathfindingError(Exception):
    """Base error for pathfinding failures."""


class InvalidArgumentError(PathfindingError, ValueError):
    """Raised when grid geometry or search inputs are malformed."""


class BufferOverflowError(PathfindingError, IndexError):
    """Raised when a path does not fit in the caller's output buffer."""


__all__ = ["PathfindingError", "InvalidArgumentError", "BufferOverflowError"]
