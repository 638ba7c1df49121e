"""Best-first grid search guided by Manhattan distance.

Every call owns its working state (cost, priority and predecessor maps plus
the open and closed sets), so searches may run from any number of threads.
Setting ``search.serialize`` in the configuration routes all searches through
one process-wide lock instead.
"""

from __future__ import annotations

import logging
import threading
import time
from heapq import heappop, heappush
from typing import Any, Dict, List, MutableSequence, Sequence, Set, Tuple

from ..config import CONFIG, TIE_BREAKS
from ..core.coords import Coord
from ..core.errors import InvalidArgumentError
from ..core.grid import Grid
from ..core.heuristic import manhattan_index
from ..core.neighbors import neighbors
from ..utils.observer import log_event, record_search
from .result import NO_PATH, PathResult, check_buffer, materialize, trivial_result


logger = logging.getLogger(__name__)

_search_lock = threading.Lock()


def _run(grid: Grid, start: int, target: int, tie_break: str) -> PathResult:
    """Search from ``start`` to ``target`` (cell indices) on ``grid``."""

    if start == target:
        return trivial_result()
    if not grid.is_passable(start):
        return materialize(False, {}, start, target, 0, "start_blocked")
    if not grid.is_passable(target):
        return materialize(False, {}, start, target, 0, "target_blocked")

    width, height = grid.width, grid.height

    cost_so_far: Dict[int, int] = {start: 0}
    priority: Dict[int, int] = {start: manhattan_index(width, start, target)}
    came_from: Dict[int, int] = {}
    discovered: Dict[int, int] = {start: 0}

    open_heap: List[Tuple[int, int, int]] = []
    open_set: Set[int] = {start}
    closed: Set[int] = set()

    def tie_key(cell: int) -> int:
        return discovered[cell] if tie_break == "insertion" else cell

    heappush(open_heap, (priority[start], tie_key(start), start))
    expanded = 0

    while open_heap:
        best, _, current = heappop(open_heap)

        # Superseded by a cheaper entry or already closed
        if current not in open_set or best != priority[current]:
            continue

        open_set.remove(current)
        closed.add(current)
        expanded += 1

        if current == target:
            return materialize(True, came_from, start, target, expanded)

        for neighbor in neighbors(current, width, height):
            if not grid.is_passable(neighbor) or neighbor in closed:
                continue

            cost = cost_so_far[current] + manhattan_index(width, current, neighbor)
            if neighbor not in open_set:
                open_set.add(neighbor)
                discovered[neighbor] = len(discovered)
            elif cost >= cost_so_far[neighbor]:
                continue

            cost_so_far[neighbor] = cost
            priority[neighbor] = cost + manhattan_index(width, neighbor, target)
            came_from[neighbor] = current
            heappush(open_heap, (priority[neighbor], tie_key(neighbor), neighbor))

    return materialize(False, came_from, start, target, expanded, "no_path")


def search(
    grid: Grid,
    start: Coord,
    target: Coord,
    *,
    tie_break: str | None = None,
    serialize: bool | None = None,
    event_log: List[Dict[str, Any]] | None = None,
) -> PathResult:
    """Return the path from ``start`` to ``target`` on ``grid``.

    ``tie_break`` and ``serialize`` default to the loaded configuration.
    When ``event_log`` is given a ``path_found`` or ``path_not_found`` event
    is appended to it.
    """

    if tie_break is None:
        tie_break = CONFIG.search.tie_break
    if tie_break not in TIE_BREAKS:
        raise InvalidArgumentError(
            f"tie_break must be one of {TIE_BREAKS}, got {tie_break!r}"
        )
    if serialize is None:
        serialize = CONFIG.search.serialize

    start_index = grid.index_of(start)
    target_index = grid.index_of(target)

    started = time.perf_counter()
    if serialize:
        with _search_lock:
            result = _run(grid, start_index, target_index, tie_break)
    else:
        result = _run(grid, start_index, target_index, tie_break)
    record_search(time.perf_counter() - started)

    logger.debug(
        "Search %s -> %s: %s, length %d, expanded %d",
        start,
        target,
        "found" if result.found else result.reason,
        result.length,
        result.expanded,
    )
    if event_log is not None:
        log_event(
            "path_found" if result.found else "path_not_found",
            {
                "start": start_index,
                "target": target_index,
                "length": result.length,
                "expanded": result.expanded,
                "reason": result.reason,
            },
            event_log,
        )
    return result


def find_path(
    start_x: int,
    start_y: int,
    target_x: int,
    target_y: int,
    grid: Sequence[int] | Grid,
    width: int,
    height: int,
    out_buffer: MutableSequence[int],
    out_capacity: int,
) -> int:
    """Write the path into ``out_buffer`` and return its length in cells.

    Returns ``0`` when start equals target and ``NO_PATH`` (-1) when the
    target cannot be reached. Raises :class:`InvalidArgumentError` for bad
    geometry and :class:`BufferOverflowError` when the path would not fit in
    ``out_capacity``; the buffer is left untouched in every failure case.
    """

    check_buffer(out_buffer, out_capacity)
    if isinstance(grid, Grid):
        if (grid.width, grid.height) != (width, height):
            raise InvalidArgumentError(
                f"grid is {grid.width}x{grid.height}, caller passed {width}x{height}"
            )
        field = grid
    else:
        field = Grid(grid, width, height)

    result = search(field, (start_x, start_y), (target_x, target_y))
    if not result.found:
        return NO_PATH
    return result.write_into(out_buffer, out_capacity)


__all__ = ["find_path", "search", "NO_PATH"]
