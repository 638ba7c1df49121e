"""Grid pathfinding primitive.

Importing the package does not touch logging. Applications call
:func:`configure_logging` once at start-up to apply the ``logging`` section of
``config.yaml``.
"""

from .config import CONFIG, load_config
from .logging_setup import configure_logging
from .search import NO_PATH, PathResult, find_path, search
from .utils.profiling import profile_searches

__all__ = [
    "CONFIG",
    "load_config",
    "configure_logging",
    "find_path",
    "search",
    "NO_PATH",
    "PathResult",
    "profile_searches",
]
