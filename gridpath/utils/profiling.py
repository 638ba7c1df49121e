"""cProfile helpers for measuring search performance."""

from __future__ import annotations

import cProfile
import pstats
from pathlib import Path
from typing import Iterable, List, Tuple

from ..core.coords import Coord
from ..core.grid import Grid
from ..search.pathfinding import search
from ..search.result import PathResult


def profile_searches(
    grid: Grid,
    queries: Iterable[Tuple[Coord, Coord]],
    out_path: str | Path = "profile.prof",
    *,
    repeat: int = 1,
) -> Tuple[pstats.Stats, List[PathResult]]:
    """Run every ``(start, target)`` query on ``grid`` under cProfile.

    The query list is searched ``repeat`` times. Durations are recorded by
    :func:`~gridpath.search.pathfinding.search` itself, so the observer
    history grows by exactly one entry per search.

    Returns
    -------
    tuple
        Profiling statistics (also dumped to ``out_path``) and the results of
        the last pass, in query order.
    """

    if repeat < 1:
        raise ValueError("repeat must be at least 1")
    pairs = list(queries)

    profiler = cProfile.Profile()
    results: List[PathResult] = []
    profiler.enable()
    try:
        for _ in range(repeat):
            results = [search(grid, start, target) for start, target in pairs]
    finally:
        profiler.disable()
    profiler.dump_stats(str(Path(out_path)))
    return pstats.Stats(profiler), results


__all__ = ["profile_searches"]
