"""Turn the terminal state of a search into a :class:`PathResult`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, MutableSequence, Optional

from ..core.errors import BufferOverflowError, InvalidArgumentError


NO_PATH = -1


@dataclass(frozen=True)
class PathResult:
    """Outcome of one search.

    ``path`` holds cell indices from start to target inclusive. It is empty
    both when no path exists and when start equals target; ``found`` tells
    the two apart.
    """

    found: bool
    path: List[int] = field(default_factory=list)
    expanded: int = 0
    reason: Optional[str] = None

    @property
    def length(self) -> int:
        """Number of cells in the path, or ``NO_PATH`` when unreachable."""
        return len(self.path) if self.found else NO_PATH

    def write_into(self, buffer: MutableSequence[int], capacity: int) -> int:
        """Copy the path into ``buffer`` from offset 0 and return :attr:`length`.

        Nothing is written unless the whole path fits in ``capacity``.
        """

        check_buffer(buffer, capacity)
        if len(self.path) > capacity:
            raise BufferOverflowError(
                f"path of {len(self.path)} cells does not fit in capacity {capacity}"
            )
        for offset, cell in enumerate(self.path):
            buffer[offset] = cell
        return self.length


def check_buffer(buffer: MutableSequence[int], capacity: int) -> None:
    """Validate the caller's ``capacity`` against ``buffer``."""

    if capacity < 0:
        raise InvalidArgumentError(f"out_capacity must not be negative, got {capacity}")
    if capacity > len(buffer):
        raise BufferOverflowError(
            f"out_capacity {capacity} exceeds buffer length {len(buffer)}"
        )


def trivial_result() -> PathResult:
    """Result for a search whose start is its target."""
    return PathResult(found=True, path=[], expanded=0)


def materialize(
    found: bool,
    came_from: Dict[int, int],
    start: int,
    target: int,
    expanded: int,
    reason: Optional[str] = None,
) -> PathResult:
    """Build a :class:`PathResult`, walking ``came_from`` back from ``target``."""

    if not found:
        return PathResult(found=False, expanded=expanded, reason=reason or "no_path")

    path = [target]
    node = target
    while node != start:
        node = came_from[node]
        path.append(node)
    path.reverse()
    return PathResult(found=True, path=path, expanded=expanded)


__all__ = ["NO_PATH", "PathResult", "check_buffer", "materialize", "trivial_result"]
