"""Logging stand-in that leaves lib_log_rich untouched."""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Accept the configuration and do nothing."""


__all__ = ["init_logging_in_memory"]
