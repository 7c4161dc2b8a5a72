"""Configuration ports backed by nothing but memory."""

from __future__ import annotations

import tempfile
from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import OutputFormat

_EMPTY = Config({}, {})


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Every profile resolves to the same empty configuration."""
    return _EMPTY


def get_default_config_path_in_memory() -> Path:
    """A path under the temp directory; nothing is written there."""
    return Path(tempfile.gettempdir()) / "greetings" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Discard the configuration instead of rendering it."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
