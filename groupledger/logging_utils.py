"""Mini README: Application-wide logging helpers for groupledger.

Structure:
    * get_logger - factory that returns module loggers with baseline configuration.
    * configure_root_logger - installs the shared handler and adjusts the level.

Usage:
    Modules import ``get_logger`` and keep a module-level ``LOGGER``. The CLI
    calls ``configure_root_logger`` with the configured level; the handler is
    installed exactly once and later calls only change the level, so reloading
    modules never duplicates output.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str, None] = None) -> None:
    """Configure the root logger with a debugging friendly formatter."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if level is not None:
        root_logger.setLevel(level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    if level is None:
        root_logger.setLevel(logging.WARNING)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
