"""Typed run configuration, its YAML loader and command-line overrides."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, confloat, field_validator

from ..utils.errors import ConfigError

MONOSPACE_FONT = "Courier"
PROPORTIONAL_FONT = "Helvetica"

PaperSize = Literal["A4", "A3", "A5", "Letter", "Legal"]
PAPER_SIZES: tuple[str, ...] = ("A4", "A3", "A5", "Letter", "Legal")

# ---------------------------------------------------------------------------
# Font resolution
# ---------------------------------------------------------------------------


def resolve_font(font: str, *, mono: bool, proportional: bool) -> str:
    """Return the font family to render with.

    ``proportional`` switches ``mono`` off.  With ``mono`` in effect the
    family is always :data:`MONOSPACE_FONT`; otherwise the default monospace
    name falls back to :data:`PROPORTIONAL_FONT` and any other explicit name is
    kept as given.
    """

    if proportional:
        mono = False
    if mono:
        return MONOSPACE_FONT
    if font == MONOSPACE_FONT:
        return PROPORTIONAL_FONT
    return font


# ---------------------------------------------------------------------------
# Pydantic model
# ---------------------------------------------------------------------------


class Configuration(BaseModel):
    """Resolved options for a single conversion run."""

    title: str = ""
    paper: PaperSize = "A4"
    landscape: bool = False
    font_size: confloat(gt=0.0, allow_inf_nan=False) = 12.0
    output: Path = Path("output.pdf")
    font: str = MONOSPACE_FONT
    mono: bool = True
    proportional: bool = False
    page_breaks: bool = False
    page_numbers: bool = False
    open_pdf_file: bool = False
    input_files: tuple[Path, ...] = ()

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("paper", mode="before")
    @classmethod
    def _normalize_paper(cls, value: Any) -> Any:
        # accept "a4", "LETTER", ...
        if isinstance(value, str):
            for name in PAPER_SIZES:
                if name.lower() == value.strip().lower():
                    return name
        return value

    @field_validator("font")
    @classmethod
    def _font_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("font name must not be empty")
        return value

    @property
    def orientation(self) -> Literal["P", "L"]:
        return "L" if self.landscape else "P"

    @property
    def resolved_font(self) -> str:
        return resolve_font(self.font, mono=self.mono, proportional=self.proportional)

    @property
    def line_height(self) -> float:
        """Body line height in millimetres."""
        return self.font_size * 0.45

    @property
    def reads_stdin(self) -> bool:
        return not self.input_files


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def _first_error_line(exc: Exception) -> str:
    lines = str(exc).splitlines()
    if isinstance(exc, ValidationError) and len(lines) >= 3:
        # "<n> validation error(s) for Configuration" / field / message
        return f"{lines[1].strip()}: {lines[2].strip()}"
    return lines[0] if lines else type(exc).__name__


def _validate(data: Mapping[str, Any]) -> Configuration:
    try:
        return Configuration.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigError(_first_error_line(exc)) from exc


def load_config(path: str | os.PathLike[str] | None = None) -> Configuration:
    """Load configuration from package defaults and an optional YAML file.

    Keys in the user file use the :class:`Configuration` field names and
    replace the defaults one by one.  Unknown keys and invalid values raise
    :class:`~pdfpipe.utils.errors.ConfigError`.
    """

    with (
        importlib_resources.files("pdfpipe.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    merged: dict[str, Any] = dict(defaults)
    if path is not None:
        try:
            with Path(path).open("r", encoding="utf-8") as f:
                overrides = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"{path}: {_first_error_line(exc)}") from exc
        if not isinstance(overrides, dict):
            raise ConfigError(f"{path}: expected a mapping of option names to values")
        merged.update(overrides)

    return _validate(merged)


def apply_overrides(cfg: Configuration, **overrides: Any) -> Configuration:
    """Return a copy of ``cfg`` with every non-``None`` override applied.

    The copy is validated again so that command-line values obey the same
    rules as values read from YAML.
    """

    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return cfg
    data = cfg.model_dump()
    data.update(updates)
    return _validate(data)


__all__ = [
    "MONOSPACE_FONT",
    "PROPORTIONAL_FONT",
    "PAPER_SIZES",
    "PaperSize",
    "Configuration",
    "resolve_font",
    "load_config",
    "apply_overrides",
]
