from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from pdfpipe.cli import app
from pdfpipe.utils.errors import ContentReadError


def test_unsupported_font(tmp_path: Path) -> None:
    out = tmp_path / "out.pdf"
    result = CliRunner().invoke(app, ["--font", "unsupported-name", "-o", str(out)], input="x\n")
    assert result.exit_code == 4
    assert "Error setting font" in result.output
    assert "unsupported-name" in result.output
    assert not out.exists()
    assert "PDF created" not in result.output


def test_unwritable_output(tmp_path: Path) -> None:
    blocker = tmp_path / "file.txt"
    blocker.write_text("not a directory", encoding="utf-8")
    out = blocker / "out.pdf"
    result = CliRunner().invoke(app, ["-x", "-o", str(out)], input="x\n")
    assert result.exit_code == 3
    assert "Error writing PDF" in result.output
    assert "Opening PDF file" not in result.output


def test_bad_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    result = CliRunner().invoke(
        app, ["--config", str(bad_cfg), "-o", str(tmp_path / "o.pdf")], input="x\n"
    )
    assert result.exit_code == 4
    assert "Error loading config" in result.output


def test_bad_paper(tmp_path: Path) -> None:
    result = CliRunner().invoke(app, ["-g", "B5", "-o", str(tmp_path / "o.pdf")], input="x\n")
    assert result.exit_code == 4


def test_stdin_failure_is_fatal(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def _broken(stream: object = None) -> None:
        raise ContentReadError("boom")

    monkeypatch.setattr("pdfpipe.io.read_stdin", _broken)
    out = tmp_path / "o.pdf"
    result = CliRunner().invoke(app, ["-o", str(out)])
    assert result.exit_code == 1
    assert "Error reading from stdin: boom" in result.output
    assert not out.exists()


def test_infinite_font_size(tmp_path: Path) -> None:
    out = tmp_path / "o.pdf"
    result = CliRunner().invoke(app, ["-s", "inf", "-t", "T", "-o", str(out)], input="x\n")
    assert result.exit_code == 4
    assert "Error loading config" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert not out.exists()
