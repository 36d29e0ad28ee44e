"""Logging setup for the fivem-utility CLI.

Log records go to stderr through the standard library handlers, so they
never mix with the ``print --json`` or ``version-server`` output on stdout.
The default level is WARNING: a normal run only logs degraded artifact
fetches and skipped resource symlink loops. ``FIVEM_LOG_LEVEL=DEBUG``
additionally traces every parsed file and ``exec`` hop.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from .constants import DEFAULT_LOG_LEVEL

_LEVEL_MAP = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def configure_logging(level: str | int | None = None, *, force: bool = False) -> None:
    """Configure root logger.

    Order of precedence for level:
    1. Explicit `level` argument if given
    2. Environment variable `FIVEM_LOG_LEVEL`
    3. Fallback to `WARNING` so regular command output stays readable
    """
    if level is None:
        level = os.environ.get("FIVEM_LOG_LEVEL", DEFAULT_LOG_LEVEL)

    if isinstance(level, str):
        level = _LEVEL_MAP.get(level.upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=force,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a project logger."""
    return logging.getLogger(name or "fivem_util")


__all__ = ["configure_logging", "get_logger"]
