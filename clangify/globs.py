# clangify/globs.py
"""Synthesize CMake glob patterns for a list of project folders."""

from __future__ import annotations

from typing import Iterable, List

from clangify.constants import GLOB_PATTERN_TEMPLATE

__all__ = ["glob_patterns"]


def glob_patterns(dirs: Iterable[str], ext: str) -> List[str]:
    """Return ``${CMAKE_CURRENT_SOURCE_DIR}/<dir>/*.<ext>`` for each folder.

    An empty ``dirs`` yields an empty list; the caller then omits the whole
    glob block for that category.
    """
    return [GLOB_PATTERN_TEMPLATE.format(dir=d, ext=ext) for d in dirs]
