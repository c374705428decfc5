"""Logging helpers.

All package loggers live under the ``fd_schemes`` namespace. Nothing is
emitted until :func:`configure_logging` installs a handler (the library only
attaches a ``NullHandler``), so embedding applications keep control of output.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_ROOT = "fd_schemes"
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

logging.getLogger(_ROOT).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger for ``name`` (typically ``__name__``)."""
    if name is None or name == _ROOT:
        return logging.getLogger(_ROOT)
    if not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level '{level}'")
        return resolved
    return int(level)


def configure_logging(
    level: int | str = logging.WARNING,
    *,
    stream: TextIO | None = None,
    format_string: str = _FORMAT,
) -> logging.Logger:
    """Install a single stream handler on the package logger.

    Calling this again replaces the previously installed handler instead of
    stacking a new one.
    """
    logger = logging.getLogger(_ROOT)
    lvl = _coerce_level(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_fd_schemes_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setFormatter(logging.Formatter(format_string))
    handler.setLevel(lvl)
    handler._fd_schemes_handler = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(lvl)
    logger.propagate = False
    return logger
