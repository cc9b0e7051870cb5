# clangify/generator.py
"""
Build the ClangTools snippet for a ``CMakeLists.txt`` file.

Pipeline
--------
1. Read the build description once.
2. Start the project-name and target scans on worker threads
   (:class:`clangify.extractor.FactScans`).
3. Walk the project tree for source and header folders.
4. Relativize, deduplicate and let the user confirm each category.
5. Synthesize glob patterns and assemble the snippet.

:func:`generate_snippet` writes nothing; the caller decides whether to
:func:`append_snippet` the result.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, List, Sequence, Union

from clangify.classifier import find_header_dirs, find_source_dirs
from clangify.constants import HEADER_EXT, SOURCE_EXT
from clangify.dialog import filter_options
from clangify.errors import ListFileError
from clangify.extractor import FactScans
from clangify.globs import glob_patterns
from clangify.relativizer import relative_dirs
from clangify.template import assemble_snippet

__all__ = ["Selector", "accept_all", "read_list_file", "append_snippet", "generate_snippet"]

logger = logging.getLogger(__name__)

#: ``(name, message, options) -> kept options``
Selector = Callable[[str, str, Sequence[str]], List[str]]


def accept_all(_name: str, _message: str, options: Sequence[str]) -> List[str]:
    """Selector for headless runs: keep every discovered folder."""
    return list(options)


def read_list_file(list_file: Union[str, Path]) -> str:
    """Return the text of ``list_file``.

    Raises
    ------
    ListFileError
        If the file cannot be read.
    """
    try:
        return Path(list_file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ListFileError(f"read file failed: {list_file}: {exc}") from exc


def append_snippet(list_file: Union[str, Path], snippet: str) -> None:
    """Append ``snippet`` verbatim to the end of ``list_file``.

    Raises
    ------
    ListFileError
        If the file cannot be opened for append or written.
    """
    try:
        with open(list_file, "a", encoding="utf-8") as f:
            f.write(snippet)
    except OSError as exc:
        raise ListFileError(f"append failed: {list_file}: {exc}") from exc
    logger.debug("Appended %d characters to %s", len(snippet), list_file)


def generate_snippet(list_file: Union[str, Path], select: Selector = filter_options) -> str:
    """Return the ClangTools snippet for ``list_file``.

    Parameters
    ----------
    list_file
        Path to the project's ``CMakeLists.txt``. Its directory is the project
        root every relative folder is computed against.
    select
        Confirmation step for discovered folders. Defaults to the interactive
        checkbox; pass :func:`accept_all` for headless runs.
    """
    content = read_list_file(list_file)
    root = Path(list_file).resolve().parent

    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="clangify-scan") as pool:
        scans = FactScans.start(pool, content)

        src_dirs = relative_dirs(root, find_source_dirs(root))
        src_dirs = select("source filter", "Verify your source folder(s):", src_dirs)

        header_dirs = relative_dirs(root, find_header_dirs(root))
        header_dirs = select("header filter", "Verify your header folder(s):", header_dirs)

        facts = scans.result()

    logger.info(
        "Project %r: %d target(s), %d source folder(s), %d header folder(s)",
        facts.name,
        len(facts.targets),
        len(src_dirs),
        len(header_dirs),
    )

    return assemble_snippet(
        facts,
        glob_patterns(src_dirs, SOURCE_EXT),
        glob_patterns(header_dirs, HEADER_EXT),
    )
