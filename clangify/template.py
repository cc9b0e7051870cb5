# clangify/template.py
"""
Assemble the ClangTools snippet appended to ``CMakeLists.txt``.

Design
------
- Substitution is literal (``str.replace``), one token at a time, every
  occurrence of a token replaced.
- A category with no glob patterns contributes no ``file(GLOB_RECURSE ...)``
  block at all; its block token becomes the empty string.
- The result is returned verbatim. It is not checked against CMake grammar.
"""

from __future__ import annotations

from typing import Sequence

from clangify.constants import (
    CLANG_CONFIG_TEMPLATE,
    GLOB_HEADERS_TOKEN,
    GLOB_JOINER,
    GLOB_SOURCES_TOKEN,
    HEADER_SNIPPET_TEMPLATE,
    HEADER_SNIPPET_TOKEN,
    PROJECT_NAME_TOKEN,
    SOURCE_SNIPPET_TEMPLATE,
    SOURCE_SNIPPET_TOKEN,
    TARGETS_TOKEN,
)
from clangify.extractor import ProjectFacts

__all__ = ["render_glob_block", "assemble_snippet"]


def render_glob_block(template: str, token: str, patterns: Sequence[str]) -> str:
    """Interpolate ``patterns`` into a glob block, or return ``""`` if there are none."""
    if not patterns:
        return ""
    return template.replace(token, GLOB_JOINER.join(patterns))


def assemble_snippet(
    facts: ProjectFacts,
    source_globs: Sequence[str],
    header_globs: Sequence[str],
    template: str = CLANG_CONFIG_TEMPLATE,
) -> str:
    """Fill the ClangTools template from scanned facts and glob patterns.

    Parameters
    ----------
    facts
        Project name and targets. Empty values are propagated as-is.
    source_globs, header_globs
        Output of :func:`clangify.globs.glob_patterns` per category.
    template
        Text containing the block, project-name and target tokens.

    Returns
    -------
    str
        The snippet, ready to append.
    """
    source_block = render_glob_block(SOURCE_SNIPPET_TEMPLATE, GLOB_SOURCES_TOKEN, source_globs)
    header_block = render_glob_block(HEADER_SNIPPET_TEMPLATE, GLOB_HEADERS_TOKEN, header_globs)

    output = template.replace(SOURCE_SNIPPET_TOKEN, source_block)
    output = output.replace(HEADER_SNIPPET_TOKEN, header_block)
    output = output.replace(PROJECT_NAME_TOKEN, facts.name)
    return output.replace(TARGETS_TOKEN, " ".join(facts.targets))
