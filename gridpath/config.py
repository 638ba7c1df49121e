"""Simple configuration loader for gridpath."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from .core.errors import InvalidArgumentError


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"

TIE_BREAKS = ("insertion", "lowest_index")


@dataclass
class SearchConfig:
    """Configuration values for the search section."""

    serialize: bool = False
    tie_break: str = "insertion"


@dataclass
class LoggingConfig:
    """Log levels applied by :func:`gridpath.logging_setup.configure_logging`."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search") or {}
    tie_break = str(search_data.get("tie_break", "insertion"))
    if tie_break not in TIE_BREAKS:
        raise InvalidArgumentError(
            f"search.tie_break must be one of {TIE_BREAKS}, got {tie_break!r}"
        )
    serialize = search_data.get("serialize", False)
    if not isinstance(serialize, bool):
        raise InvalidArgumentError(
            f"search.serialize must be true or false, got {serialize!r}"
        )
    search = SearchConfig(
        serialize=serialize,
        tie_break=tie_break,
    )

    logging_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(search=search, logging=logging_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "SearchConfig",
    "LoggingConfig",
    "TIE_BREAKS",
    "load_config",
]
