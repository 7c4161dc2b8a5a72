"""Callable protocols for everything the greetings use cases reach outside for.

Adapters are plain functions (or small callable dataclasses); they match a
port by signature alone, no inheritance required. ``Config`` is only
imported for type checking so this layer stays free of infrastructure at
runtime.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config


class ChooseTemplate(Protocol):
    """Pick one greeting template out of the offered options."""

    def __call__(self, options: Sequence[str]) -> str: ...


class FetchQuote(Protocol):
    """Produce the quotation text; failures propagate to the caller."""

    def __call__(self, config: Config) -> str: ...


class GetConfig(Protocol):
    """Merged configuration for an optional profile."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Location of the defaults file that ships with the package."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Render configuration for ``greetings config``."""

    def __call__(
        self,
        config: Config,
        *,
        output_format: OutputFormat = ...,
        section: str | None = ...,
        profile: str | None = ...,
    ) -> None: ...


class InitLogging(Protocol):
    """Start the logging runtime from the ``[lib_log_rich]`` section."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "ChooseTemplate",
    "DisplayConfig",
    "FetchQuote",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
]
