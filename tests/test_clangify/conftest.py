# tests/test_clangify/conftest.py
from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace
from typing import Dict, Iterable

import pytest


def make_tree(root: Path, files: Dict[str, str]) -> Path:
    """Create ``files`` (relative path -> content) under ``root``."""
    for rel, content in files.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def cmake_project(tmp_path):
    """Factory: build a CMake project and return its CMakeLists.txt path."""
    def _build(list_text: str, files: Iterable[str] = ()) -> Path:
        root = tmp_path / "proj"
        root.mkdir()
        make_tree(root, {f: "" for f in files})
        list_file = root / "CMakeLists.txt"
        list_file.write_text(list_text, encoding="utf-8")
        return list_file
    return _build


@pytest.fixture
def tools_dir(tmp_path):
    """A complete tools directory with the three artifacts."""
    src = tmp_path / "tools"
    make_tree(
        src,
        {
            ".clang-format": "BasedOnStyle: Google\n",
            ".clang-tidy": "Checks: '-*,bugprone-*'\n",
            "cmake/ClangTools.cmake": "function(add_format_target name)\nendfunction()\n",
        },
    )
    return src


@pytest.fixture
def answers():
    """Factory: a questionary prompt stub whose .ask() returns ``value``."""
    def _factory(value):
        return lambda *_a, **_k: SimpleNamespace(ask=lambda: value)
    return _factory


@pytest.fixture(autouse=True)
def reset_clangify_logger():
    """Drop handlers the CLI attaches so each test starts clean."""
    yield
    logger = logging.getLogger("clangify")
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    if hasattr(logger, "_clangify_stream_handler"):
        del logger._clangify_stream_handler
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def tree():
    """The :func:`make_tree` helper, for tests that build their own layout."""
    return make_tree
