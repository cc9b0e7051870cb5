# clangify/dialog.py
"""
Interactive prompts used while generating the ClangTools configuration.

Public API
----------
- filter_options(name, message, options): Multi-select confirmation with
  every option pre-checked; returns the options the user kept.
- ask_tools_dir(default): Read the tools directory with path completion.

Notes
-----
- A cancelled checkbox (``ask()`` returning ``None``) keeps nothing and is
  not an error. Any other prompt failure is fatal and raises
  :class:`PromptError` naming the prompt.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

import click
import questionary
from prompt_toolkit import prompt

from clangify.completers import ToolsDirCompleter
from clangify.errors import PromptError, ToolsDirError

__all__ = ["filter_options", "ask_tools_dir"]

logger = logging.getLogger(__name__)

TOOLS_DIR_PROMPT = "tools dir"


def _checkbox_question(message: str, options: Sequence[str]):
    """Build a questionary checkbox with all options checked."""
    choices = [questionary.Choice(title=opt, value=opt, checked=True) for opt in options]
    return questionary.checkbox(message, choices=choices)


def filter_options(name: str, message: str, options: Sequence[str]) -> List[str]:
    """Ask the user which of ``options`` to keep.

    Parameters
    ----------
    name : str
        Prompt name, used in error messages.
    message : str
        Question shown to the user.
    options : Sequence[str]
        Candidate values; all are selected by default.

    Returns
    -------
    List[str]
        Selected options. Empty when there was nothing to choose from, when
        everything was deselected, or when the prompt was cancelled.

    Raises
    ------
    PromptError
        If the prompt itself fails (no terminal, I/O error, ...).
    """
    if not options:
        logger.debug("Prompt '%s' skipped: no options", name)
        return []

    try:
        answers = _checkbox_question(message, options).ask()
    except Exception as exc:  # noqa: BLE001
        raise PromptError(name, exc) from exc

    if answers is None:
        click.echo("⚠️  No selection made; nothing kept.")
        return []
    return [str(a) for a in answers]


def ask_tools_dir(default: Path) -> Path:
    """Ask for the directory holding ``cmake/ClangTools.cmake`` and the clang configs.

    A blank answer selects ``default``.

    Raises
    ------
    PromptError
        If reading input fails or is interrupted.
    ToolsDirError
        If the answer is not an existing directory.
    """
    click.secho("? ", fg="green", bold=True, nl=False)
    click.secho("Please type the path to cmake-tools: ", fg="white", bold=True)

    try:
        answer = prompt("> ", completer=ToolsDirCompleter([str(default)]))
    except (Exception, KeyboardInterrupt) as exc:  # noqa: BLE001
        raise PromptError(TOOLS_DIR_PROMPT, exc) from exc

    answer = answer.strip()
    tools_dir = Path(answer).expanduser() if answer else default
    if not tools_dir.is_dir():
        raise ToolsDirError(f"{tools_dir} is not a path.")

    click.echo(f"{tools_dir} is a path.")
    return tools_dir
