"""Open a finished PDF with the platform's default viewer."""

from __future__ import annotations

import os

import typer

from ..utils.logging import get_logger

log = get_logger(__name__)


def open_pdf(path: str | os.PathLike[str]) -> bool:
    """Ask the desktop environment to open ``path``; return ``True`` on success.

    Best effort only: launcher failures are logged and never raised.
    """

    target = os.fspath(path)
    typer.echo(f"Opening PDF file: {target}")
    try:
        status = typer.launch(target)
    except OSError as exc:
        log.warning("could not open %s: %s", target, exc)
        return False
    if status != 0:
        log.warning("viewer for %s exited with status %d", target, status)
        return False
    return True


__all__ = ["open_pdf"]
