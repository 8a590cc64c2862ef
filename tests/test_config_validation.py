from pathlib import Path

import pytest
from pydantic import ValidationError

from pdfpipe.config import Configuration, apply_overrides, load_config
from pdfpipe.utils.errors import ConfigError


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown: true\n")
    with pytest.raises(ConfigError):
        load_config(cfg_file)


def test_invalid_paper(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("paper: B5\n")
    with pytest.raises(ConfigError, match="paper"):
        load_config(cfg_file)


def test_non_mapping_yaml(tmp_path: Path) -> None:
    cfg_file = tmp_path / "list.yml"
    cfg_file.write_text("- a\n- b\n")
    with pytest.raises(ConfigError):
        load_config(cfg_file)


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yml")


@pytest.mark.parametrize("size", [0.0, -3.0, float("inf"), float("nan")])
def test_font_size_must_be_positive_and_finite(size: float) -> None:
    with pytest.raises(ConfigError):
        apply_overrides(load_config(), font_size=size)


def test_blank_font_rejected() -> None:
    with pytest.raises(ConfigError):
        apply_overrides(load_config(), font="  ")


def test_overrides_skip_none_and_return_copy() -> None:
    base = load_config()
    same = apply_overrides(base, title=None, paper=None)
    assert same is base

    changed = apply_overrides(base, title="Report", input_files=["a.txt", "b.txt"])
    assert changed.title == "Report"
    assert changed.input_files == (Path("a.txt"), Path("b.txt"))
    assert base.title == ""


def test_configuration_is_frozen() -> None:
    cfg = Configuration()
    with pytest.raises(ValidationError):
        cfg.title = "changed"  # type: ignore[misc]


def test_infinite_font_size_in_yaml(tmp_path: Path) -> None:
    cfg_file = tmp_path / "inf.yml"
    cfg_file.write_text("font_size: .inf\n")
    with pytest.raises(ConfigError, match="font_size"):
        load_config(cfg_file)
