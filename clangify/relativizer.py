# clangify/relativizer.py
"""
Turn absolute directories into folders relative to the project root.

Only the first path segment below the root is kept, so ``root/b/c`` becomes
``b``. The generated globs are recursive, which makes the coarsening safe for
discovery even though it may pick up more files than the exact leaf folder.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, List, Union

__all__ = ["root_children", "unique", "relative_dirs"]

logger = logging.getLogger(__name__)


def root_children(root: Union[str, "os.PathLike[str]"], abs_dirs: Iterable[str]) -> List[str]:
    """Map each directory to its top-level folder under ``root``.

    Directories equal to ``root`` itself have no such folder and are dropped
    with a warning. Duplicates are preserved; see :func:`unique`.
    """
    root_str = os.fspath(root)
    children: List[str] = []
    for abs_dir in abs_dirs:
        rel = os.path.relpath(abs_dir, root_str)
        if rel == os.curdir:
            logger.warning(
                "Files directly in %s are not covered by a folder glob; skipping.", root_str
            )
            continue
        first = rel.split(os.sep, 1)[0]
        if first == os.pardir:
            # Outside the project root; cannot be expressed relative to it.
            logger.warning("Ignoring %s: not located under %s", abs_dir, root_str)
            continue
        children.append(first)
    return children


def unique(items: Iterable[str]) -> List[str]:
    """Deduplicate and sort for a stable display order."""
    return sorted(set(items))


def relative_dirs(root: Union[str, "os.PathLike[str]"], abs_dirs: Iterable[str]) -> List[str]:
    """Relativize then deduplicate ``abs_dirs``."""
    return unique(root_children(root, abs_dirs))
