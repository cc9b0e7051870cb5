# clangify/errors.py
"""
Exception hierarchy for clangify.

Every fatal condition derives from :class:`ClangifyError`, a
:class:`click.ClickException`, so the CLI prints ``Error: <message>`` and
exits with status 1 without a traceback. Extraction ambiguity (no or several
``project()`` calls) is not an error and has no exception here.
"""

from __future__ import annotations

import click

__all__ = [
    "ClangifyError",
    "ListFileError",
    "WalkError",
    "ToolsDirError",
    "MissingArtifactError",
    "CopyError",
    "PromptError",
]


class ClangifyError(click.ClickException):
    """Base class for fatal clangify errors."""


class ListFileError(ClangifyError):
    """Raised when the CMakeLists.txt file cannot be read or appended to."""


class WalkError(ClangifyError):
    """Raised when the project tree cannot be fully walked."""


class ToolsDirError(ClangifyError):
    """Raised when the tools directory does not exist."""


class MissingArtifactError(ClangifyError):
    """Raised when a required config artifact is absent from the tools directory."""


class CopyError(ClangifyError):
    """Raised when copying an artifact fails at the OS level."""


class PromptError(ClangifyError):
    """Raised when an interactive prompt fails."""

    def __init__(self, prompt_name: str, cause: BaseException) -> None:
        self.prompt_name = prompt_name
        self.cause = cause
        super().__init__(f"Prompt '{prompt_name}' failed: {cause!r}")
