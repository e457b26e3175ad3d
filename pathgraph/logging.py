"""Logging helpers for pathgraph.

Every module asks for its logger through :func:`get_logger` so that all
pathgraph output lives under the ``pathgraph`` namespace and shares one
handler configuration. Graph code logs mutations and algorithm runs at
DEBUG, so nothing is printed unless a caller lowers the level.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO

_ROOT_NAME = "pathgraph"
_LEVEL_ENV_VAR = "PATHGRAPH_LOG_LEVEL"
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


_default_level: int = _coerce_level(os.getenv(_LEVEL_ENV_VAR, "WARNING"))

# Loggers handed out so far, keyed by full dotted name
_loggers: dict[str, logging.Logger] = {}


def _qualified(name: Optional[str]) -> str:
    if not name or name == _ROOT_NAME:
        return _ROOT_NAME
    if name.startswith(_ROOT_NAME + "."):
        return name
    return f"{_ROOT_NAME}.{name}"


def _attach_handler(logger: logging.Logger, level: int, stream: TextIO, fmt: str) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the pathgraph logger for ``name``.

    Pass ``__name__`` from the calling module. Names outside the package
    namespace are nested under ``pathgraph.``. The first call for a name
    installs a stderr handler; later calls return the cached logger.

    Example:
        >>> from pathgraph.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("added node %s", "node 1")
    """
    logger_name = _qualified(name)
    cached = _loggers.get(logger_name)
    if cached is not None:
        return cached

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        _attach_handler(logger, _default_level, sys.stderr, _FORMAT)
        # Handlers are per logger; avoid printing twice through "pathgraph"
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Change the level of every pathgraph logger, present and future.

    Args:
        level: A ``logging`` constant or its name, e.g. ``"DEBUG"``.
    """
    global _default_level
    _default_level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(_default_level)
        for handler in logger.handlers:
            handler.setLevel(_default_level)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Replace the handler of every pathgraph logger.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string; defaults to ``[LEVEL] name: message``.
        stream: Output stream (default: ``sys.stderr``).
    """
    global _default_level
    _default_level = _coerce_level(level)

    for logger in _loggers.values():
        _attach_handler(
            logger,
            _default_level,
            stream if stream is not None else sys.stderr,
            format_string or _FORMAT,
        )
