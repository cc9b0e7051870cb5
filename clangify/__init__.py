"""
clangify: wire clang-format and clang-tidy into CMake projects.

Scans a project's CMakeLists.txt and source tree, generates a ClangTools
snippet, copies the clang configuration artifacts and appends the snippet.

Entry point: ``clangify.cli:main`` (also ``python -m clangify``).
"""

__version__ = "1.0.0"
__author__ = "clangify contributors"
__license__ = "Apache-2.0"
