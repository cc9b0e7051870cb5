"""
Tests for clangify.extractor: project-name and target scans.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from clangify import extractor
from clangify.extractor import FactScans, ProjectFacts


LIST_TEXT = """\
cmake_minimum_required(VERSION 3.14)
project(my-proj VERSION 1.0 LANGUAGES CXX)

add_library(libcore STATIC src/core.cpp)
add_executable( appmain src/main.cpp)
target_link_libraries(appmain PRIVATE libcore)
"""


# ---------------------------------------------------------------------------
# Target scan
# ---------------------------------------------------------------------------

def test_targets_in_document_order():
    assert extractor.find_target_names(LIST_TEXT) == ["libcore", "appmain"]


def test_targets_keep_duplicates():
    text = "add_library(a x.cpp)\nadd_executable(b y.cpp)\nadd_library(a z.cpp)\n"
    assert extractor.find_target_names(text) == ["a", "b", "a"]


def test_targets_empty_when_none_declared():
    assert extractor.find_target_names("project(x)\n") == []


def test_target_links_are_not_targets():
    assert extractor.find_target_names("target_link_libraries(app PRIVATE core)\n") == []


# ---------------------------------------------------------------------------
# Project-name scan
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "text, expected",
    [
        ("project(myproj)\n", "myproj"),
        ("project(my-proj VERSION 1.0)\n", "my-proj"),
        ("project (spaced)\n", "spaced"),
        ("project(\n  multi_line\n  VERSION 2.0\n)\n", "multi_line"),
    ],
)
def test_project_name_single_declaration(text, expected):
    assert extractor.find_project_name(text) == expected


def test_project_name_empty_when_missing():
    assert extractor.find_project_name("add_library(core a.cpp)\n") == ""


def test_project_name_empty_when_declared_twice():
    assert extractor.find_project_name("project(a)\nproject(b)\n") == ""


def test_project_name_ignores_longer_identifiers():
    text = "project(real)\nmy_project(fake)\nsub-project(other)\n"
    assert extractor.find_project_name(text) == "real"


# ---------------------------------------------------------------------------
# Concurrent extraction
# ---------------------------------------------------------------------------

def _scan(text):
    with ThreadPoolExecutor(max_workers=2) as pool:
        return FactScans.start(pool, text).result()


def test_fact_scans_merge_both_scans():
    facts = _scan(LIST_TEXT)
    assert facts == ProjectFacts(name="my-proj", targets=("libcore", "appmain"))


def test_fact_scans_degrade_to_empty_values():
    facts = _scan("")
    assert facts.name == ""
    assert facts.targets == ()


def test_scans_complete_in_either_order(monkeypatch):
    """The name scan is held back until the target scan finished; no deadlock."""
    targets_done = threading.Event()
    real_targets = extractor.find_target_names
    real_name = extractor.find_project_name

    def slow_name(text):
        assert targets_done.wait(timeout=5)
        return real_name(text)

    def fast_targets(text):
        result = real_targets(text)
        targets_done.set()
        return result

    monkeypatch.setattr(extractor, "find_project_name", slow_name)
    monkeypatch.setattr(extractor, "find_target_names", fast_targets)

    with ThreadPoolExecutor(max_workers=2) as pool:
        facts = FactScans.start(pool, LIST_TEXT).result()
    assert facts.name == "my-proj"
    assert facts.targets == ("libcore", "appmain")
