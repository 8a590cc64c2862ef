"""Shared fixtures for the pdfpipe test suite."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from pypdf import PdfReader


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PDFPIPE_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _restore_pdfpipe_logger() -> Iterator[None]:
    """Undo process-global logger changes (e.g. ``-v``) made by a test."""

    logger = logging.getLogger("pdfpipe")
    level, propagate, handlers = logger.level, logger.propagate, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.propagate = propagate
    logger.handlers[:] = handlers


@pytest.fixture
def page_texts() -> Callable[[Path], list[str]]:
    """Return a helper extracting the text of every page of a PDF."""

    def _texts(path: Path) -> list[str]:
        return [page.extract_text() or "" for page in PdfReader(str(path)).pages]

    return _texts


@pytest.fixture
def make_text_files(tmp_path: Path) -> Callable[..., list[Path]]:
    """Create ``<name>.txt`` files from keyword arguments, in order."""

    def _make(**contents: str) -> list[Path]:
        paths: list[Path] = []
        for name, text in contents.items():
            path = tmp_path / f"{name}.txt"
            path.write_text(text, encoding="utf-8")
            paths.append(path)
        return paths

    return _make
