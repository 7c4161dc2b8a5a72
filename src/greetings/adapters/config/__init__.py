"""Configuration adapter: layered loading, ``--set`` overrides and display."""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path, validate_profile
from .overrides import ConfigOverride, apply_overrides, parse_override

__all__ = [
    "ConfigOverride",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "parse_override",
    "validate_profile",
]
