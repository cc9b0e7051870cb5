# clangify/config.py
"""
Runtime settings for clangify.

Settings come from environment variables, optionally seeded from a ``.env``
file in the working directory (python-dotenv). Command-line flags override
them in :mod:`clangify.cli`.

Environment variables
---------------------
CLANGIFY_TOOLS_DIR
    Default directory holding ``.clang-format``, ``.clang-tidy`` and
    ``cmake/``. Falls back to the artifacts bundled with the package.
CLANGIFY_HEADLESS=1|0
    Skip every prompt: keep all discovered folders, use the default tools dir.
CLANGIFY_FORCE_COLOR=true|false
    Force colored logs on or off (default: only when stderr is a TTY).
CLANGIFY_LOG_LEVEL=DEBUG|INFO|WARNING|ERROR
    Console log level (default INFO).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from clangify.copier import default_tools_dir

__all__ = ["Settings", "load_settings", "env_flag"]

_TRUE_VALUES = {"1", "true", "yes", "on"}


def env_flag(value: Optional[str]) -> Optional[bool]:
    """Parse a boolean environment value; ``None`` when unset or blank."""
    if value is None or not value.strip():
        return None
    return value.strip().lower() in _TRUE_VALUES


def _log_level(name: Optional[str]) -> int:
    if not name:
        return logging.INFO
    level = logging.getLevelName(name.strip().upper())
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.INFO


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    tools_dir: Path
    headless: bool = False
    force_color: Optional[bool] = None
    log_level: int = logging.INFO


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from ``environ`` (default: ``os.environ`` after ``.env``)."""
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    tools_dir = environ.get("CLANGIFY_TOOLS_DIR")
    return Settings(
        tools_dir=Path(tools_dir).expanduser() if tools_dir else default_tools_dir(),
        headless=bool(env_flag(environ.get("CLANGIFY_HEADLESS"))),
        force_color=env_flag(environ.get("CLANGIFY_FORCE_COLOR")),
        log_level=_log_level(environ.get("CLANGIFY_LOG_LEVEL")),
    )
