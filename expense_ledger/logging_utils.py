"""Mini README: Application-wide logging helpers for the expense ledger.

Structure:
    * get_logger - factory returning module loggers.
    * configure_root_logger - installs the stderr handler and sets the level.

Usage:
    Modules import ``get_logger`` to create contextual loggers. The command
    line entry point calls ``configure_root_logger`` once at start-up; later
    calls only adjust the level so handlers are never duplicated when the CLI
    is invoked repeatedly inside one interpreter (for example under tests).
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def _coerce_level(level: Union[int, str]) -> int:
    """Translate level names such as ``"debug"`` into logging constants."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level}")
    return resolved


def configure_root_logger(level: Union[int, str] = logging.WARNING) -> None:
    """Configure the root logger with a compact formatter on stderr."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    root_logger.setLevel(_coerce_level(level))
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger."""

    return logging.getLogger(name)
