"""Root logger setup shared by the Tkinter and NiceGUI entrypoints.

Environment overrides win over the settings toggle:
  - TASKBOARD_LOG_LEVEL: level name (``debug``, ``WARNING``) or number
  - TASKBOARD_DEBUG / TASKBOARD_DEBUG_LOGGING: truthy -> DEBUG
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_ENV = "TASKBOARD_LOG_LEVEL"
DEBUG_ENVS = ("TASKBOARD_DEBUG", "TASKBOARD_DEBUG_LOGGING")

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def parse_level(value: Union[int, str, None], fallback: int = logging.INFO) -> int:
    """Turn a level name or number into a logging level; unknown -> ``fallback``."""
    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    # getLevelName maps known names back to their number
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else fallback


def env_level() -> Optional[int]:
    """Level forced by the environment, or ``None`` when nothing is set."""
    explicit = os.getenv(LEVEL_ENV)
    if explicit and explicit.strip():
        return parse_level(explicit)
    for name in DEBUG_ENVS:
        if (os.getenv(name) or "").strip().lower() in _TRUTHY:
            return logging.DEBUG
    return None


def configure_root(default_level: Union[int, str] = logging.INFO) -> int:
    """Install the compact console format once and set the root level.

    Returns:
        The effective root level.
    """
    forced = env_level()
    level = forced if forced is not None else parse_level(default_level)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(level)
    return level


def apply_gui_preferences(debug_enabled: bool) -> int:
    """Re-apply the ``debug_logging`` setting unless the environment forces a level."""
    forced = env_level()
    level = forced if forced is not None else (logging.DEBUG if debug_enabled else logging.INFO)
    logging.getLogger().setLevel(level)
    return level


def level_name(level: int) -> str:
    return logging.getLevelName(level)


def env_requests_debug() -> bool:
    """True when the environment asks for DEBUG (or more verbose) output."""
    forced = env_level()
    return forced is not None and forced <= logging.DEBUG


__all__ = [
    "DEBUG_ENVS",
    "LEVEL_ENV",
    "apply_gui_preferences",
    "configure_root",
    "env_level",
    "env_requests_debug",
    "level_name",
    "parse_level",
]
