"""Content acquisition.

Text reaches the document either from the named input files or, when no file
is named, from standard input.  Each source becomes one :class:`ContentUnit`
and the units keep input order.

A file that cannot be read is reported and skipped; the remaining files are
still rendered.  Standard input is the only source in its mode, so a failure
while reading it raises :class:`~pdfpipe.utils.errors.ContentReadError`.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TextIO

import typer

from ..config import Configuration
from ..utils.errors import ContentReadError
from ..utils.logging import get_logger
from .readers.txt_reader import read_text

STDIN_SOURCE = "<stdin>"

ReadErrorHandler = Callable[[str, Exception], None]

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ContentUnit:
    """One block of raw text destined for the document body."""

    source: str
    text: str


def report_read_error(source: str, exc: Exception) -> None:
    """Default handler: one line on ``stderr`` per unreadable file."""

    typer.echo(f"Error reading file {source}: {exc}", err=True)


def read_inputs(
    paths: Iterable[str | os.PathLike[str]],
    *,
    encoding: str = "utf-8-sig",
    on_error: ReadErrorHandler | None = None,
) -> list[ContentUnit]:
    """Read every path in order, skipping the ones that fail.

    Parameters
    ----------
    paths:
        Input files in rendering order.
    encoding:
        Text encoding forwarded to :func:`~pdfpipe.io.readers.read_text`.
    on_error:
        Called with ``(path, exception)`` for each unreadable file.  Defaults
        to :func:`report_read_error`.
    """

    handler = on_error or report_read_error
    units: list[ContentUnit] = []
    for path in paths:
        source = os.fspath(path)
        try:
            text = read_text(path, encoding=encoding)
        except (OSError, UnicodeDecodeError) as exc:
            log.debug("skipping %s: %s", source, exc)
            handler(source, exc)
            continue
        log.debug("read %d chars from %s", len(text), source)
        units.append(ContentUnit(source=source, text=text))
    return units


def _utf8_stdin() -> TextIO:
    """Return ``sys.stdin`` decoding as UTF-8 regardless of the locale."""

    stream = sys.stdin
    encoding = (getattr(stream, "encoding", None) or "").lower().replace("-", "")
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None and encoding != "utf8":
        reconfigure(encoding="utf-8")
    return stream


def read_stdin(stream: TextIO | None = None) -> ContentUnit:
    """Read standard input to end-of-stream as a single content unit.

    Every line is stripped of its terminator and re-joined with ``"\\n"``, so
    the result always ends with a newline unless the input is empty.
    """

    try:
        if stream is None:
            stream = _utf8_stdin()
        text = "".join(line.rstrip("\r\n") + "\n" for line in stream)
    except (OSError, UnicodeDecodeError) as exc:
        raise ContentReadError(str(exc)) from exc
    log.debug("read %d chars from %s", len(text), STDIN_SOURCE)
    return ContentUnit(source=STDIN_SOURCE, text=text)


def acquire_content(
    cfg: Configuration,
    *,
    stdin: TextIO | None = None,
    on_error: ReadErrorHandler | None = None,
) -> list[ContentUnit]:
    """Return the content units for ``cfg``: named files, else standard input."""

    if cfg.input_files:
        return read_inputs(cfg.input_files, on_error=on_error)
    return [read_stdin(stdin)]


__all__ = [
    "STDIN_SOURCE",
    "ContentUnit",
    "ReadErrorHandler",
    "report_read_error",
    "read_inputs",
    "read_stdin",
    "acquire_content",
]
