"""search package."""

from .pathfinding import find_path, search
from .result import NO_PATH, PathResult

__all__ = ["find_path", "search", "NO_PATH", "PathResult"]
