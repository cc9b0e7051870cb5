# clangify/completers.py
"""
Prompt-toolkit completer for the tools-directory prompt.

Public API
----------
- ToolsDirCompleter: offers fixed suggestions (e.g. the bundled tools
  directory) whose text starts with what was typed, then filesystem path
  completions for the typed fragment.

Notes
-----
- Prefix matching of fixed suggestions is case-insensitive.
- Errors from the underlying path completer are swallowed so a flaky
  filesystem never breaks the prompt.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from prompt_toolkit.completion import Completer, Completion, PathCompleter
from prompt_toolkit.document import Document

__all__ = ["ToolsDirCompleter"]

logger = logging.getLogger(__name__)


class ToolsDirCompleter(Completer):
    """Fixed suggestions first, filesystem paths after.

    Parameters
    ----------
    suggestions : Iterable[str]
        Paths always offered when they match the typed prefix.

    Examples
    --------
    >>> comp = ToolsDirCompleter(["/opt/clangify/resources"])
    >>> # prompt("> ", completer=comp)
    """

    __slots__ = ("suggestions", "path_completer")

    def __init__(self, suggestions: Iterable[str]) -> None:
        self.suggestions = list(suggestions)
        self.path_completer = PathCompleter(expanduser=True)

    def get_completions(  # type: ignore[override]
        self, document: Document, complete_event: Any
    ) -> Iterator[Completion]:
        """Yield matching fixed suggestions, then path completions."""
        typed = document.text_before_cursor
        seen = set()

        for value in self.suggestions:
            if value.lower().startswith(typed.lower()):
                seen.add(value)
                yield Completion(text=value, start_position=-len(typed), display=value)

        try:
            for c in self.path_completer.get_completions(document, complete_event):
                full_text = typed + c.text
                if full_text in seen:
                    continue
                yield Completion(
                    text=full_text,
                    start_position=-len(typed),
                    display=full_text,
                    display_meta=c.display_meta,
                )
        except Exception as exc:  # noqa: BLE001
            logger.debug("Path completion failed for %r: %s", typed, exc)
            return
