"""Typer-based command line interface.

``pdfpipe`` reads text from the named input files (or standard input when no
file is named), lays it out on PDF pages and writes the result.  Options are
resolved in three layers: packaged defaults, an optional YAML file given with
``--config`` (or ``PDFPIPE_CONFIG``), and finally the command-line flags.

Exit codes
----------
0 success (unreadable input files are reported and skipped)
1 standard input could not be read
3 I/O error writing the PDF
4 configuration or font error
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer

from . import __version__
from .config import apply_overrides, load_config
from .io import acquire_content
from .render import build_document, open_pdf
from .utils.errors import ConfigError, ContentReadError, OutputWriteError, UnsupportedFontError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="pdfpipe",
    help="Create a PDF file quickly from some text.",
    add_completion=False,
)

log = get_logger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _split_paths(values: list[str] | None) -> list[str]:
    """Flatten repeated and comma separated ``--input-files`` values."""

    paths: list[str] = []
    for value in values or []:
        paths.extend(part.strip() for part in value.split(",") if part.strip())
    return paths


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pdfpipe {__version__}")
        raise typer.Exit()


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


@app.command()
def run(  # noqa: PLR0913
    files: Optional[list[Path]] = typer.Argument(  # noqa: B008
        None, help="Input text files; appended after --input-files", show_default=False
    ),
    title: Optional[str] = typer.Option(  # noqa: B008
        None, "--title", "-t", help="A title string for the document"
    ),
    paper: Optional[str] = typer.Option(  # noqa: B008
        None, "--paper", "-g", help="Paper size (A4, A3, A5, Letter, Legal) [default: A4]"
    ),
    page_breaks: Optional[bool] = typer.Option(  # noqa: B008
        None,
        "--page-breaks/--no-page-breaks",
        "-b",
        help="Add a page break after each file's contents",
    ),
    page_numbers: Optional[bool] = typer.Option(  # noqa: B008
        None, "--page-numbers/--no-page-numbers", "-n", help="Add page numbers in footer"
    ),
    landscape: Optional[bool] = typer.Option(  # noqa: B008
        None, "--landscape/--portrait", "-l", help="Landscape orientation"
    ),
    font_size: Optional[float] = typer.Option(  # noqa: B008
        None, "--font-size", "-s", help="Body font size [default: 12.0]"
    ),
    output: Optional[Path] = typer.Option(  # noqa: B008
        None, "--output", "-o", help="Output file name [default: output.pdf]"
    ),
    font: Optional[str] = typer.Option(  # noqa: B008
        None, "--font", "-f", help="Name of font to use, or a .ttf file [default: Courier]"
    ),
    mono: Optional[bool] = typer.Option(  # noqa: B008
        None, "--mono/--no-mono", help="Use monospace font [default: mono]"
    ),
    proportional: Optional[bool] = typer.Option(  # noqa: B008
        None,
        "--proportional/--no-proportional",
        "-p",
        help="Use proportional font (overrides --mono)",
    ),
    open_pdf_file: Optional[bool] = typer.Option(  # noqa: B008
        None,
        "--open-pdf-file/--no-open-pdf-file",
        "-x",
        help="Attempt to open the resulting file",
    ),
    input_files: Optional[list[str]] = typer.Option(  # noqa: B008
        None,
        "--input-files",
        help="Text file input; repeat or separate with commas. Reads stdin when empty",
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", envvar="PDFPIPE_CONFIG", help="YAML file overriding the defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
    version: Optional[bool] = typer.Option(  # noqa: B008
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> Path:
    """Create a PDF file from text files or standard input."""

    configure_logging(verbose)

    paths = _split_paths(input_files) + [str(p) for p in files or []]
    if font is not None and mono is None:
        # an explicit --font is honoured unless --mono is also given
        mono = False
    try:
        cfg = load_config(config_path)
        cfg = apply_overrides(
            cfg,
            title=title,
            paper=paper,
            page_breaks=page_breaks,
            page_numbers=page_numbers,
            landscape=landscape,
            font_size=font_size,
            output=output,
            font=font,
            mono=mono,
            proportional=proportional,
            open_pdf_file=open_pdf_file,
            input_files=paths or None,
        )
    except ConfigError as exc:
        _safe_exit(4, f"Error loading config: {exc}")
    log.debug("resolved font %s, paper %s (%s)", cfg.resolved_font, cfg.paper, cfg.orientation)

    try:
        units = acquire_content(cfg)
    except ContentReadError as exc:
        _safe_exit(1, f"Error reading from stdin: {exc}")
    log.debug("collected %d content unit(s)", len(units))

    try:
        out = build_document(cfg, units)
    except UnsupportedFontError as exc:
        _safe_exit(4, f"Error setting font: {exc}")
    except OutputWriteError as exc:
        _safe_exit(3, f"Error writing PDF: {exc}")

    typer.echo(f"PDF created: {out}")

    if cfg.open_pdf_file:
        open_pdf(out)
    return out


__all__ = ["app", "run"]
