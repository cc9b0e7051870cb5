# clangify/banner.py
"""
Terminal presentation helpers for clangify.

Public API
----------
- interpolate_color(stops, t): RGB interpolation across color stops.
- print_banner(console): Render the CLANGIFY banner (pyfiglet) with a
  left-to-right green→cyan gradient using Rich.
- show_snippet(console, snippet): Print the generated CMake snippet.

Rendering failures fall back to plain text so they never abort a run.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

import pyfiglet
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

RGB = Tuple[int, int, int]
RGBStops = Sequence[RGB]

__all__ = ["interpolate_color", "print_banner", "show_snippet"]

logger = logging.getLogger(__name__)

_BANNER_TEXT = "clangify"
_BANNER_FONT = "slant"

_COLOR_STOPS_DEFAULT: RGBStops = (
    (0, 160, 80),     # Green
    (0, 200, 160),    # Teal
    (0, 220, 255),    # Cyan
    (200, 255, 255),  # Near white
)


def _clamp01(x: float) -> float:
    return min(1.0, max(0.0, x))


def _validate_color_stops(stops: RGBStops) -> None:
    """Raise ValueError unless there are ≥ 2 stops with components in 0..255."""
    if stops is None or len(stops) < 2:
        raise ValueError("color stops must contain at least two (R,G,B) tuples.")
    for idx, (r, g, b) in enumerate(stops):
        if not (0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255):
            raise ValueError(f"color component out of range at index {idx}: {(r, g, b)}")


def interpolate_color(stops: RGBStops, t: float) -> RGB:
    """Piecewise-linear interpolation between adjacent stops; ``t`` is clamped to [0, 1]."""
    _validate_color_stops(stops)
    t = _clamp01(float(t))
    if t <= 0.0:
        return stops[0]
    if t >= 1.0:
        return stops[-1]

    seg = 1.0 / (len(stops) - 1)
    idx = int(t / seg)
    if idx >= len(stops) - 1:
        return stops[-1]

    local_t = (t - seg * idx) / seg
    c1 = stops[idx]
    c2 = stops[idx + 1]
    return (
        int(c1[0] + (c2[0] - c1[0]) * local_t),
        int(c1[1] + (c2[1] - c1[1]) * local_t),
        int(c1[2] + (c2[2] - c1[2]) * local_t),
    )


def _banner_lines(text: str = _BANNER_TEXT, font: str = _BANNER_FONT) -> List[str]:
    """Render ``text`` with pyfiglet and return its non-trailing lines."""
    rendered = pyfiglet.figlet_format(text, font=font)
    return rendered.rstrip("\n").splitlines()


def _build_gradient_text(ascii_art: Iterable[str], color_stops: RGBStops) -> Text:
    """Apply a left→right gradient to every non-space character."""
    _validate_color_stops(color_stops)
    lines = list(ascii_art)
    visible = [line for line in lines if line.strip()]
    if not visible:
        raise ValueError("ascii_art is empty or whitespace-only.")

    max_width = max(len(line) for line in visible)
    gradient_text = Text()
    for line in lines:
        for col_idx, char in enumerate(line):
            if char == " ":
                gradient_text.append(char)
                continue
            r, g, b = interpolate_color(color_stops, col_idx / max(1, max_width - 1))
            gradient_text.append(char, style=f"bold rgb({r},{g},{b})")
        gradient_text.append("\n")
    return gradient_text


def print_banner(console: Console) -> None:
    """Print the gradient banner, or a plain bold title if rendering fails."""
    try:
        console.print(_build_gradient_text(_banner_lines(), _COLOR_STOPS_DEFAULT))
    except Exception as exc:  # noqa: BLE001
        logger.debug("Banner rendered without gradient: %s", exc)
        console.print(Text(_BANNER_TEXT.upper(), style="bold white"))


def show_snippet(console: Console, snippet: str) -> None:
    """Print ``snippet`` highlighted as CMake inside a titled panel."""
    console.print(
        Panel(
            Syntax(snippet.strip("\n"), "cmake", theme="ansi_dark", word_wrap=True),
            title="CMakeLists.txt addition",
            border_style="cyan",
        )
    )
