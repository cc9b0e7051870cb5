"""
Tests for clangify.globs and clangify.template.
"""

from __future__ import annotations

from clangify import constants
from clangify.extractor import ProjectFacts
from clangify.globs import glob_patterns
from clangify.template import assemble_snippet, render_glob_block


# ---------------------------------------------------------------------------
# globs
# ---------------------------------------------------------------------------

def test_glob_patterns_one_per_folder():
    assert glob_patterns(["a", "b"], "cpp") == [
        "${CMAKE_CURRENT_SOURCE_DIR}/a/*.cpp",
        "${CMAKE_CURRENT_SOURCE_DIR}/b/*.cpp",
    ]


def test_glob_patterns_empty_input():
    assert glob_patterns([], "h") == []


# ---------------------------------------------------------------------------
# render_glob_block
# ---------------------------------------------------------------------------

def test_render_glob_block_lists_one_pattern_per_line():
    block = render_glob_block(
        constants.SOURCE_SNIPPET_TEMPLATE,
        constants.GLOB_SOURCES_TOKEN,
        ["${CMAKE_CURRENT_SOURCE_DIR}/a/*.cpp", "${CMAKE_CURRENT_SOURCE_DIR}/b/*.cpp"],
    )
    assert block == (
        "file(GLOB_RECURSE SOURCES\n"
        "    ${CMAKE_CURRENT_SOURCE_DIR}/a/*.cpp\n"
        "    ${CMAKE_CURRENT_SOURCE_DIR}/b/*.cpp\n"
        "  )"
    )


def test_render_glob_block_empty_is_omitted():
    assert render_glob_block(constants.HEADER_SNIPPET_TEMPLATE, constants.GLOB_HEADERS_TOKEN, []) == ""


# ---------------------------------------------------------------------------
# assemble_snippet
# ---------------------------------------------------------------------------

def test_assemble_fills_every_token():
    facts = ProjectFacts(name="myproj", targets=("libcore", "appmain"))
    out = assemble_snippet(
        facts,
        glob_patterns(["src"], "cpp"),
        glob_patterns(["include"], "h"),
    )
    assert "add_format_target(myproj FILES ${SOURCES} ${HEADERS})" in out
    assert "add_tidy_target(myproj\n" in out
    assert "DEPENDS libcore appmain\n" in out
    assert "${CMAKE_CURRENT_SOURCE_DIR}/src/*.cpp" in out
    assert "${CMAKE_CURRENT_SOURCE_DIR}/include/*.h" in out
    for token in (
        constants.SOURCE_SNIPPET_TOKEN,
        constants.HEADER_SNIPPET_TOKEN,
        constants.PROJECT_NAME_TOKEN,
        constants.TARGETS_TOKEN,
        constants.GLOB_SOURCES_TOKEN,
        constants.GLOB_HEADERS_TOKEN,
    ):
        assert token not in out


def test_assemble_without_headers_omits_header_block():
    out = assemble_snippet(ProjectFacts("p", ("t",)), glob_patterns(["src"], "cpp"), [])
    assert "file(GLOB_RECURSE SOURCES" in out
    assert "file(GLOB_RECURSE HEADERS" not in out
    assert "/*.h" not in out


def test_assemble_keeps_cmake_variable_references():
    out = assemble_snippet(ProjectFacts("p", ()), [], [])
    assert "${SOURCES}" in out and "${HEADERS}" in out
    assert "${CMAKE_CURRENT_LIST_DIR}/cmake/ClangTools.cmake" in out


def test_assemble_with_empty_facts_is_degenerate_but_valid_text():
    out = assemble_snippet(ProjectFacts(), [], [])
    assert "add_format_target( FILES" in out
    assert "DEPENDS \n" in out
    assert "file(GLOB_RECURSE" not in out


def test_assemble_replaces_every_occurrence():
    template = "${PROJECT_NAME}|${PROJECT_NAME}|${TARGETS}|${GLOB_SOURCE_SNIPPET}${GLOB_HEADER_SNIPPET}"
    out = assemble_snippet(ProjectFacts("n", ("a", "b")), [], [], template=template)
    assert out == "n|n|a b|"
