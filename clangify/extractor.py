# clangify/extractor.py
"""
Extract the project name and build targets from ``CMakeLists.txt`` text.

Public API
----------
- ProjectFacts: Immutable result (``name``, ``targets``).
- find_target_names(text): Identifiers of every ``add_library`` /
  ``add_executable`` call, in document order, duplicates kept.
- find_project_name(text): Name from the single ``project()`` call, or ``""``.
- FactScans: Both scans submitted to an executor, awaited later.

Notes
-----
- These are narrow regex scans, not a CMake parser.
- Zero or several ``project()`` calls degrade to an empty name so a snippet
  can still be produced; the user fills the name in by hand.
"""

from __future__ import annotations

import logging
import re
from concurrent.futures import Executor, Future
from dataclasses import dataclass, field
from typing import List, Tuple

__all__ = [
    "ProjectFacts",
    "FactScans",
    "find_target_names",
    "find_project_name",
]

logger = logging.getLogger(__name__)

_TARGET_RE = re.compile(r" *add_(?:library|executable)\( *(\w*)")
_PROJECT_RE = re.compile(r"(?<![\w-])project\s*\(\s*([\w-]*)")


@dataclass(frozen=True)
class ProjectFacts:
    """Facts scanned from one build description."""

    name: str = ""
    targets: Tuple[str, ...] = field(default_factory=tuple)


def find_target_names(text: str) -> List[str]:
    """Return the first argument of each library/executable declaration."""
    return [match.group(1) for match in _TARGET_RE.finditer(text)]


def find_project_name(text: str) -> str:
    """Return the declared project name, or ``""`` unless exactly one is found."""
    matches = _PROJECT_RE.findall(text)
    if len(matches) != 1:
        logger.warning(
            "Expected one project() declaration, found %d; leaving the project name blank.",
            len(matches),
        )
        return ""
    return matches[0]


class FactScans:
    """Handle on the two in-flight scans started by :meth:`start`.

    Each scan hands back exactly one value through its future. The futures
    are awaited independently in :meth:`result`, so either may finish first.
    """

    __slots__ = ("_name", "_targets")

    def __init__(self, name: "Future[str]", targets: "Future[List[str]]") -> None:
        self._name = name
        self._targets = targets

    @classmethod
    def start(cls, pool: Executor, text: str) -> "FactScans":
        """Submit both scans of ``text`` to ``pool``."""
        return cls(
            name=pool.submit(find_project_name, text),
            targets=pool.submit(find_target_names, text),
        )

    def result(self) -> ProjectFacts:
        """Block until both scans are done and merge them."""
        name = self._name.result()
        targets = self._targets.result()
        logger.debug("Project name: %r, targets: %s", name, targets)
        return ProjectFacts(name=name, targets=tuple(targets))
