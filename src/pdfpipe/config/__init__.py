"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. Command-line flags applied with :func:`apply_overrides`
"""

from .schema import (
    MONOSPACE_FONT,
    PROPORTIONAL_FONT,
    Configuration,
    apply_overrides,
    load_config,
    resolve_font,
)

__all__ = [
    "MONOSPACE_FONT",
    "PROPORTIONAL_FONT",
    "Configuration",
    "apply_overrides",
    "load_config",
    "resolve_font",
]
