"""Root logger setup for the ``busylight`` command.

Level precedence: ``BUSYLIGHT_LOG_LEVEL`` beats a truthy ``BUSYLIGHT_DEBUG``,
which beats the ``--log-level`` option. Unknown level names fall back to INFO.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LEVEL_ENV = "BUSYLIGHT_LOG_LEVEL"
DEBUG_ENV = "BUSYLIGHT_DEBUG"


def parse_level(name: Optional[str]) -> int:
    """Map a level name such as ``"debug"`` to its ``logging`` constant."""
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def effective_level(cli_level: Optional[str] = None) -> int:
    env_level = os.getenv(LEVEL_ENV)
    if env_level:
        return parse_level(env_level)
    if os.getenv(DEBUG_ENV, "").strip().lower() in ("1", "true", "yes", "on"):
        return logging.DEBUG
    return parse_level(cli_level)


def configure_root(cli_level: Optional[str] = None) -> int:
    """Install a stderr handler once and set the root level; returns the level."""
    level = effective_level(cli_level)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT, datefmt="%H:%M:%S")
    root.setLevel(level)
    return level
