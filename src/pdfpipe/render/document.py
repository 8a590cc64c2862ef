"""PDF document builder.

Purpose:
    Lay out content units on a reportlab canvas and write the finished PDF.

Key responsibilities:
    - Resolve the configured font (standard PDF font or a ``.ttf`` file).
    - Render the optional title, the wrapped body text and page-number footers.
    - Insert page breaks or spacing between content units.

Notes/Edge cases:
    - Positions are computed in millimetres from the top of the page, matching
      the configured line heights; reportlab draws in points from the bottom.
    - The PDF is assembled in memory and written to disk only by
      :meth:`DocumentBuilder.save`, so a font error never leaves a file behind.
"""

from __future__ import annotations

import io
from collections.abc import Sequence
from pathlib import Path

from reportlab.lib.pagesizes import A3, A4, A5, LEGAL, LETTER, landscape, portrait
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont
from reportlab.pdfgen import canvas

from .. import __version__
from ..config import Configuration
from ..io import ContentUnit
from ..utils.errors import OutputWriteError, UnsupportedFontError
from ..utils.logging import get_logger
from .layout import font_measure, wrap_text

log = get_logger(__name__)

PAGE_SIZES: dict[str, tuple[float, float]] = {
    "A4": A4,
    "A3": A3,
    "A5": A5,
    "Letter": LETTER,
    "Legal": LEGAL,
}

FONT_ALIASES: dict[str, str] = {"arial": "Helvetica"}

# Page geometry, millimetres
MARGIN = 10.0
CELL_PADDING = 1.0
BREAK_MARGIN = 20.0
FOOTER_OFFSET = 15.0
FOOTER_HEIGHT = 10.0

FOOTER_FONT = "Helvetica-Oblique"
FOOTER_FONT_SIZE = 8.0

TITLE_SCALE = 1.5
UNIT_SPACING = 2.0


def register_font(font: str) -> str:
    """Return the backend name for ``font``, registering TrueType files.

    Standard PDF fonts match case-insensitively (``courier`` -> ``Courier``)
    and ``Arial`` maps to ``Helvetica``.  A path ending in ``.ttf`` is loaded
    and registered under its file stem.

    Raises
    ------
    UnsupportedFontError
        If the name is neither a known font nor a loadable TrueType file.
    """

    if font.lower().endswith(".ttf"):
        name = Path(font).stem
        try:
            pdfmetrics.registerFont(TTFont(name, font))
        except (OSError, TTFError) as exc:
            raise UnsupportedFontError(font) from exc
        return name

    lowered = font.lower()
    if lowered in FONT_ALIASES:
        return FONT_ALIASES[lowered]
    for name in pdfmetrics.standardFonts:
        if name.lower() == lowered:
            return name
    try:
        pdfmetrics.getFont(font)
    except KeyError as exc:
        raise UnsupportedFontError(font) from exc
    return font


class DocumentBuilder:
    """Incrementally draw pages for one configuration.

    Lifecycle: construction configures the canvas and font, drawing methods
    add pages, and :meth:`save` finalizes the document exactly once.
    """

    def __init__(self, cfg: Configuration) -> None:
        self.cfg = cfg
        size = PAGE_SIZES[cfg.paper]
        self.page_width, self.page_height = landscape(size) if cfg.landscape else portrait(size)
        self._buffer = io.BytesIO()
        self._canvas = canvas.Canvas(self._buffer, pagesize=(self.page_width, self.page_height))
        self._canvas.setCreator(f"pdfpipe {__version__}")
        self._canvas.setTitle(cfg.title or cfg.output.name)

        self.font_name = register_font(cfg.resolved_font)
        self.font_size = cfg.font_size
        self._measure = font_measure(self.font_name, self.font_size)

        self.page_count = 0
        self.blocks_written = 0
        self._y = 0.0
        self._page_open = False
        self._finalized = False

    # ------------------------------------------------------------------
    # Geometry helpers
    # ------------------------------------------------------------------

    @property
    def text_width(self) -> float:
        """Printable line width in points."""
        return self.page_width - 2 * (MARGIN + CELL_PADDING) * mm

    @property
    def y(self) -> float:
        """Current vertical position in millimetres from the top edge."""
        return self._y / mm

    def _baseline(self, top: float, height: float, font_size: float) -> float:
        # vertically centred in the cell; top/height in points
        return self.page_height - (top + 0.5 * height + 0.3 * font_size)

    def _set_font(self, name: str, size: float) -> None:
        self._canvas.setFont(name, size)

    # ------------------------------------------------------------------
    # Page handling
    # ------------------------------------------------------------------

    def _footer(self) -> None:
        if not self.cfg.page_numbers:
            return
        self._set_font(FOOTER_FONT, FOOTER_FONT_SIZE)
        top = self.page_height - FOOTER_OFFSET * mm
        baseline = self._baseline(top, FOOTER_HEIGHT * mm, FOOTER_FONT_SIZE)
        right = self.page_width - (MARGIN + CELL_PADDING) * mm
        self._canvas.drawRightString(right, baseline, f"Page {self.page_count}")

    def _close_page(self) -> None:
        self._footer()
        self._canvas.showPage()
        self._page_open = False

    def add_page(self) -> None:
        """Finish the current page (drawing its footer) and start a new one."""

        self._check_open()
        if self._page_open:
            self._close_page()
        self.page_count += 1
        self._page_open = True
        self._y = MARGIN * mm
        # graphics state does not survive showPage
        self._set_font(self.font_name, self.font_size)
        log.debug("started page %d", self.page_count)

    def ln(self, height: float) -> None:
        """Advance the cursor by ``height`` millimetres."""
        self._y += height * mm

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def write_title(self, title: str) -> None:
        """Draw ``title`` centred at 1.5x the body size, then skip one font size."""

        if not title:
            return
        size = self.font_size * TITLE_SCALE
        height = self.font_size * TITLE_SCALE * mm
        self._set_font(self.font_name, size)
        baseline = self._baseline(self._y, height, size)
        self._canvas.drawCentredString(self.page_width / 2, baseline, title)
        self._y += height
        self._set_font(self.font_name, self.font_size)
        self.ln(self.font_size)

    def write_block(self, text: str, line_height: float) -> int:
        """Draw ``text`` as wrapped lines of ``line_height`` millimetres.

        Pages are added automatically once a line would cross the bottom
        break margin.  Returns the number of lines drawn.
        """

        self._check_open()
        height = line_height * mm
        limit = self.page_height - BREAK_MARGIN * mm
        x = (MARGIN + CELL_PADDING) * mm
        lines = wrap_text(text, self.text_width, self._measure)
        for line in lines:
            if self._y + height > limit:
                self.add_page()
            if line:
                baseline = self._baseline(self._y, height, self.font_size)
                self._canvas.drawString(x, baseline, line)
            self._y += height
        self.blocks_written += 1
        return len(lines)

    def render(self, units: Sequence[ContentUnit]) -> None:
        """Draw the first page, the title and every content unit in order."""

        self.add_page()
        self.write_title(self.cfg.title)
        last = len(units) - 1
        for index, unit in enumerate(units):
            drawn = self.write_block(unit.text, self.cfg.line_height)
            log.debug("rendered %s (%d lines)", unit.source, drawn)
            if index == last:
                break
            if self.cfg.page_breaks:
                self.add_page()
            else:
                self.ln(self.cfg.line_height * UNIT_SPACING)

    # ------------------------------------------------------------------
    # Finalization
    # ------------------------------------------------------------------

    def _check_open(self) -> None:
        if self._finalized:
            raise RuntimeError("document already saved")

    def to_bytes(self) -> bytes:
        """Finalize the canvas and return the serialized PDF."""

        self._check_open()
        if not self._page_open:
            self.add_page()
        self._close_page()
        self._canvas.save()
        self._finalized = True
        return self._buffer.getvalue()

    def save(self, path: str | Path | None = None) -> Path:
        """Write the PDF to ``path`` (default: the configured output).

        Raises
        ------
        OutputWriteError
            If the file or its parent directories cannot be written.
        """

        out = Path(path) if path is not None else self.cfg.output
        data = self.to_bytes()
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_bytes(data)
        except OSError as exc:
            raise OutputWriteError(f"{out}: {exc.strerror or exc}") from exc
        log.debug("wrote %d bytes, %d pages to %s", len(data), self.page_count, out)
        return out


def build_document(cfg: Configuration, units: Sequence[ContentUnit]) -> Path:
    """Render ``units`` with ``cfg`` and write the PDF to ``cfg.output``."""

    builder = DocumentBuilder(cfg)
    builder.render(units)
    return builder.save()


__all__ = [
    "PAGE_SIZES",
    "DocumentBuilder",
    "build_document",
    "register_font",
]
