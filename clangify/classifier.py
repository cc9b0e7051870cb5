# clangify/classifier.py
"""
Classify where source and header files live inside a CMake project.

Public API
----------
- find_match_dirs(root, pattern): Directories containing a matching file.
- find_source_dirs(root): Directories holding ``*.cpp`` files.
- find_header_dirs(root): Directories holding ``*.h`` / ``*.hpp`` files.

Notes
-----
- Patterns are matched against the file path tail, never file content.
- Any error raised while walking is fatal (:class:`WalkError`); a
  configuration built from a partially seen tree would be wrong.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Set, Union

from clangify.constants import HEADER_PATTERN, SOURCE_PATTERN
from clangify.errors import WalkError

__all__ = ["find_match_dirs", "find_source_dirs", "find_header_dirs"]

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _raise_walk_error(exc: OSError) -> None:
    """``os.walk`` error hook: abort the walk instead of skipping the entry."""
    raise WalkError(f"File walk failed at {exc.filename!s}: {exc.strerror or exc}") from exc


def find_match_dirs(root: PathLike, pattern: str) -> Set[str]:
    """Return the set of directories under ``root`` containing a matching file.

    Parameters
    ----------
    root
        Directory to walk recursively.
    pattern
        Regular expression searched in each regular file's path.

    Returns
    -------
    set of str
        Absolute paths of directories holding at least one match. Directories
        without matching files are absent.

    Raises
    ------
    WalkError
        If ``root`` is not a directory or any directory cannot be listed.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise WalkError(f"File walk failed: {root_path} is not a directory")

    regex = re.compile(pattern)
    dirs: Set[str] = set()
    for dirpath, _dirnames, filenames in os.walk(root_path, onerror=_raise_walk_error):
        for name in filenames:
            if regex.search(os.path.join(dirpath, name)):
                dirs.add(dirpath)
                break

    logger.debug("Pattern %r matched in %d folder(s) under %s", pattern, len(dirs), root_path)
    return dirs


def find_source_dirs(root: PathLike) -> Set[str]:
    """Directories of ``.cpp`` files under ``root``."""
    return find_match_dirs(root, SOURCE_PATTERN)


def find_header_dirs(root: PathLike) -> Set[str]:
    """Directories of ``.h`` / ``.hpp`` files under ``root``."""
    return find_match_dirs(root, HEADER_PATTERN)
