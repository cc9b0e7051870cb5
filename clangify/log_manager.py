# clangify/log_manager.py
"""
Logger factory for clangify.

:func:`get_logger` returns a configured :class:`logging.Logger` with:
- Colored console output via `colorlog` when stderr is a TTY (or when forced)
- Plain console output otherwise
- Optional UTF-8 file logging
- Idempotent handler attachment (no duplicate handlers on repeated calls)

Modules log through ``logging.getLogger(__name__)``; the CLI configures the
``clangify`` parent logger once so their records end up here.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Dict, Optional

import colorlog

__all__ = ["get_logger"]

_LEVEL_COLORS: Dict[str, str] = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

_PLAIN_FMT = "[%(levelname)s] %(asctime)s - [%(name)s] %(message)s"
_PLAIN_DATEFMT = "%Y-%m-%d %H:%M:%S"
_COLOR_FMT = (
    "%(log_color)s[%(levelname)s]%(reset)s %(asctime)s - "
    "[%(name)s] %(message)s"
)


def _should_use_color(force_color: Optional[bool]) -> bool:
    if force_color is not None:
        return force_color
    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


def _build_stream_handler(use_color: bool) -> logging.StreamHandler:
    if use_color:
        handler: logging.StreamHandler = colorlog.StreamHandler(stream=sys.stderr)
        handler.setFormatter(
            colorlog.ColoredFormatter(
                fmt=_COLOR_FMT, datefmt=_PLAIN_DATEFMT, log_colors=_LEVEL_COLORS
            )
        )
    else:
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=_PLAIN_FMT, datefmt=_PLAIN_DATEFMT))
    return handler


def _attach_stream_handler(logger: logging.Logger, force_color: Optional[bool]) -> None:
    """Attach a single stream handler to ``logger`` if not already attached.

    On later calls the existing handler is pointed at the current
    ``sys.stderr``, which may have been swapped (e.g. by a test runner).
    """
    attached = getattr(logger, "_clangify_stream_handler", None)
    if attached is not None:
        attached.stream = sys.stderr
        return
    handler = _build_stream_handler(_should_use_color(force_color))
    logger.addHandler(handler)
    logger._clangify_stream_handler = handler  # type: ignore[attr-defined]


def _attach_file_handler(logger: logging.Logger, log_to_file: str) -> None:
    """Attach one FileHandler per absolute path."""
    log_file_path = os.path.abspath(log_to_file)
    for h in logger.handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == log_file_path:
            return

    fhandler = logging.FileHandler(log_file_path, encoding="utf-8")
    fhandler.setFormatter(logging.Formatter(fmt=_PLAIN_FMT, datefmt=_PLAIN_DATEFMT))
    logger.addHandler(fhandler)


def get_logger(
    name: str = "clangify",
    level: int = logging.INFO,
    log_to_file: Optional[str] = None,
    force_color: Optional[bool] = None,
) -> logging.Logger:
    """
    Return a configured, reusable :class:`logging.Logger`.

    Parameters
    ----------
    name : str, default "clangify"
        Logger name. Child loggers (``clangify.<module>``) propagate here.
    level : int, default logging.INFO
        Log level for this logger.
    log_to_file : Optional[str], default None
        Optional path for file logging, attached once per unique path.
    force_color : Optional[bool], default None
        Force colored console output on or off; ``None`` means "if a TTY".

    Returns
    -------
    logging.Logger
        The configured logger, with ``propagate = False``.

    Raises
    ------
    OSError
        If ``log_to_file`` cannot be opened.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    _attach_stream_handler(logger, force_color)
    if log_to_file:
        _attach_file_handler(logger, log_to_file)

    logger.propagate = False
    return logger
