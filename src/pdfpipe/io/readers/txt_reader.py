"""Plain-text reader.

This module exposes :func:`read_text` which loads a whole text file in one
call.  UTF-8 byte-order marks (BOM) are consumed transparently by using the
``"utf-8-sig"`` codec by default, so a BOM never reaches the rendered page.

``FileNotFoundError``, ``UnicodeDecodeError`` and other I/O errors propagate to
the caller, which decides whether a failure is fatal.
"""

from __future__ import annotations

import os

PathLikeStr = os.PathLike[str]


def read_text(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Read a plain-text file.

    Parameters
    ----------
    path:
        Path to the file on disk.
    encoding:
        Text encoding to use.  Defaults to ``"utf-8-sig"``.
    errors:
        Error handling strategy passed to :func:`open`.

    Returns
    -------
    str
        The file contents with universal newline translation applied, so
        ``\r\n`` and ``\r`` line endings arrive as ``\n``.
    """

    with open(path, "r", encoding=encoding, errors=errors) as f:
        return f.read()


__all__ = ["read_text"]
