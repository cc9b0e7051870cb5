# clangify/constants.py
"""
Shared constants for clangify (Python 3.9+).

This module centralizes the ClangTools template text, the file-category
patterns and the names of the configuration artifacts copied into a CMake
project, so every stage of the generator agrees on them.

Public API
----------
- CLANG_CONFIG_TEMPLATE: Block appended to ``CMakeLists.txt``.
- SOURCE_SNIPPET_TEMPLATE / HEADER_SNIPPET_TEMPLATE: ``file(GLOB_RECURSE ...)``
  blocks nested inside the main template.
- GLOB_PATTERN_TEMPLATE: Shape of one glob line.
- SOURCE_PATTERN / HEADER_PATTERN: Filename regexes per category.
- SOURCE_EXT / HEADER_EXT: Extensions used in synthesized globs.
- CONFIG_FILE_NAMES: Artifacts copied from the tools directory.

Notes
-----
- Placeholder tokens are literal and case-sensitive. ``${SOURCES}`` and
  ``${HEADERS}`` are CMake variable references, not tokens.
"""

from __future__ import annotations

from typing import Final, Tuple

__all__ = [
    "CLANG_CONFIG_TEMPLATE",
    "SOURCE_SNIPPET_TEMPLATE",
    "HEADER_SNIPPET_TEMPLATE",
    "GLOB_PATTERN_TEMPLATE",
    "GLOB_JOINER",
    "SOURCE_SNIPPET_TOKEN",
    "HEADER_SNIPPET_TOKEN",
    "GLOB_SOURCES_TOKEN",
    "GLOB_HEADERS_TOKEN",
    "PROJECT_NAME_TOKEN",
    "TARGETS_TOKEN",
    "SOURCE_PATTERN",
    "HEADER_PATTERN",
    "SOURCE_EXT",
    "HEADER_EXT",
    "CONFIG_FILE_NAMES",
    "LIST_FILE_NAME",
]

# ---------------------------------------------------------------------------
# Placeholder tokens
# ---------------------------------------------------------------------------
SOURCE_SNIPPET_TOKEN: Final[str] = "${GLOB_SOURCE_SNIPPET}"
HEADER_SNIPPET_TOKEN: Final[str] = "${GLOB_HEADER_SNIPPET}"
GLOB_SOURCES_TOKEN: Final[str] = "${GLOB_SOURCES}"
GLOB_HEADERS_TOKEN: Final[str] = "${GLOB_HEADERS}"
PROJECT_NAME_TOKEN: Final[str] = "${PROJECT_NAME}"
TARGETS_TOKEN: Final[str] = "${TARGETS}"

# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------
CLANG_CONFIG_TEMPLATE: Final[str] = """
## ClangTools
include(${CMAKE_CURRENT_LIST_DIR}/cmake/ClangTools.cmake OPTIONAL
  RESULT_VARIABLE CLANG_TOOLS
)
if(CLANG_TOOLS)
  ${GLOB_SOURCE_SNIPPET}
  ${GLOB_HEADER_SNIPPET}
  add_format_target(${PROJECT_NAME} FILES ${SOURCES} ${HEADERS})
  add_tidy_target(${PROJECT_NAME}
    FILES ${SOURCES}
    DEPENDS ${TARGETS}
  )
endif()
"""

SOURCE_SNIPPET_TEMPLATE: Final[str] = (
    "file(GLOB_RECURSE SOURCES\n"
    "    ${GLOB_SOURCES}\n"
    "  )"
)

HEADER_SNIPPET_TEMPLATE: Final[str] = (
    "file(GLOB_RECURSE HEADERS\n"
    "    ${GLOB_HEADERS}\n"
    "  )"
)

#: One glob line, anchored at CMake's current source directory.
GLOB_PATTERN_TEMPLATE: Final[str] = "${{CMAKE_CURRENT_SOURCE_DIR}}/{dir}/*.{ext}"

#: Separator between glob lines inside a ``file(GLOB_RECURSE ...)`` block.
GLOB_JOINER: Final[str] = "\n    "

# ---------------------------------------------------------------------------
# File categories
# ---------------------------------------------------------------------------
SOURCE_PATTERN: Final[str] = r"\.cpp$"
HEADER_PATTERN: Final[str] = r"\.(?:h|hpp)$"

SOURCE_EXT: Final[str] = "cpp"
HEADER_EXT: Final[str] = "h"

# ---------------------------------------------------------------------------
# Artifacts copied next to CMakeLists.txt (order is the copy order)
# ---------------------------------------------------------------------------
CONFIG_FILE_NAMES: Final[Tuple[str, ...]] = (".clang-format", ".clang-tidy", "cmake")

LIST_FILE_NAME: Final[str] = "CMakeLists.txt"
