"""Line wrapping for body text.

Text is broken into lines no wider than the printable width of the page.
Widths come from the PDF backend's font metrics, so wrapping is exact for both
monospace and proportional fonts.  Explicit newlines always start a new line,
blank lines are preserved, and a word wider than the whole line is split
between characters.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from reportlab.pdfbase.pdfmetrics import stringWidth

Measure = Callable[[str], float]

TAB_SIZE = 4


def font_measure(font_name: str, font_size: float) -> Measure:
    """Return a callable measuring strings in points for the given font."""

    return partial(stringWidth, fontName=font_name, fontSize=font_size)


def wrap_line(line: str, max_width: float, measure: Measure) -> list[str]:
    """Wrap a single line (no newlines) to ``max_width`` points.

    Breaks happen at the last space that fits; the space itself is dropped.
    When no space is available the line is cut before the overflowing
    character, keeping at least one character per output line.
    """

    if measure(line) <= max_width:
        return [line]

    lines: list[str] = []
    start = 0
    sep = -1
    width = 0.0
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == " ":
            sep = i
        width += measure(ch)
        if width > max_width:
            if sep == -1:
                end = i + 1 if i == start else i
                lines.append(line[start:end])
                i = end
            else:
                lines.append(line[start:sep])
                i = sep + 1
            start = i
            sep = -1
            width = 0.0
            continue
        i += 1
    if start < n or not lines:
        lines.append(line[start:])
    return lines


def wrap_text(
    text: str,
    max_width: float,
    measure: Measure,
    *,
    tab_size: int = TAB_SIZE,
) -> list[str]:
    """Split ``text`` into rendered lines.

    A single trailing newline does not produce an empty last line, so
    ``"hello\\nworld\\n"`` yields two lines.
    """

    if text.endswith("\n"):
        text = text[:-1]
    lines: list[str] = []
    for raw in text.split("\n"):
        raw = raw.rstrip("\r").expandtabs(tab_size)
        lines.extend(wrap_line(raw, max_width, measure))
    return lines


__all__ = ["Measure", "TAB_SIZE", "font_measure", "wrap_line", "wrap_text"]
