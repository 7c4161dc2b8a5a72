"""Where greetings' ports meet their adapters.

The console scripts run on :func:`build_production`. Tests use
:func:`build_testing`, or ``dataclasses.replace`` on a production container
to swap a single boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.logging.setup import init_logging
from ..adapters.quotes.provider import fetch_quote
from ..adapters.randomness.source import choose_template
from ..application.greeter import Greeter
from ..application.ports import (
    ChooseTemplate,
    DisplayConfig,
    FetchQuote,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
)

if TYPE_CHECKING:
    # pyright checks each production adapter against its port here.
    _production_ports: tuple[GetConfig, GetDefaultConfigPath, DisplayConfig, InitLogging, ChooseTemplate, FetchQuote] = (
        get_config,
        get_default_config_path,
        display_config,
        init_logging,
        choose_template,
        fetch_quote,
    )


@dataclass(frozen=True, slots=True)
class AppServices:
    """One implementation per port, handed to the CLI through ``ctx.obj``."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    init_logging: InitLogging
    choose_template: ChooseTemplate
    fetch_quote: FetchQuote

    def greeter(self) -> Greeter:
        """Return a Greeter that picks templates with ``choose_template``."""
        return Greeter(choose=self.choose_template)


def build_production() -> AppServices:
    """Layered config, lib_log_rich, the time-seeded chooser and the configured quote."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        init_logging=init_logging,
        choose_template=choose_template,
        fetch_quote=fetch_quote,
    )


def build_testing(
    *,
    chooser: ChooseTemplate | None = None,
    quote_provider: FetchQuote | None = None,
) -> AppServices:
    """Return services that never touch disk, clock or logging runtime.

    Args:
        chooser: Deterministic chooser; the first template otherwise.
        quote_provider: Replacement provider; the fixed in-memory quote otherwise.
    """
    from ..adapters import memory

    return AppServices(
        get_config=memory.get_config_in_memory,
        get_default_config_path=memory.get_default_config_path_in_memory,
        display_config=memory.display_config_in_memory,
        init_logging=memory.init_logging_in_memory,
        choose_template=chooser or memory.choose_first_template,
        fetch_quote=quote_provider or memory.fetch_quote_in_memory,
    )


def build_greeter(choose: ChooseTemplate | None = None) -> Greeter:
    """Return a Greeter, defaulting to the time-seeded production chooser.

    Example:
        >>> build_greeter(lambda options: options[0]).hello("Gladys")
        'Hi, Gladys. Welcome!'
    """
    return Greeter(choose=choose or choose_template)


__all__ = [
    "AppServices",
    "build_greeter",
    "build_production",
    "build_testing",
]
