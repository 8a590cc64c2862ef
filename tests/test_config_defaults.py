from pathlib import Path

from pdfpipe.config import load_config


def test_default_values() -> None:
    cfg = load_config()
    assert cfg.title == ""
    assert cfg.paper == "A4"
    assert cfg.landscape is False
    assert cfg.font_size == 12.0
    assert cfg.output == Path("output.pdf")
    assert cfg.font == "Courier"
    assert cfg.mono is True
    assert cfg.proportional is False
    assert cfg.page_breaks is False
    assert cfg.page_numbers is False
    assert cfg.open_pdf_file is False
    assert cfg.input_files == ()


def test_derived_properties() -> None:
    cfg = load_config()
    assert cfg.orientation == "P"
    assert cfg.resolved_font == "Courier"
    assert cfg.line_height == 12.0 * 0.45
    assert cfg.reads_stdin is True


def test_yaml_overrides_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("paper: letter\nfont_size: 10\nlandscape: true\n", encoding="utf-8")
    cfg = load_config(cfg_file)
    assert cfg.paper == "Letter"
    assert cfg.font_size == 10.0
    assert cfg.orientation == "L"
    assert cfg.title == ""


def test_empty_yaml_keeps_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "empty.yml"
    cfg_file.write_text("", encoding="utf-8")
    assert load_config(cfg_file) == load_config()
