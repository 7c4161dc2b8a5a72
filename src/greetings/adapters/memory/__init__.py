"""Test doubles for every greetings port.

Nothing here reads files, seeds from the clock or starts lib_log_rich;
:func:`greetings.composition.build_testing` wires them together.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory, get_default_config_path_in_memory
from .logging import init_logging_in_memory
from .quotes import IN_MEMORY_QUOTE, FailingQuoteProvider, fetch_quote_in_memory
from .randomness import CyclingChoice, FixedChoice, choose_first_template

if TYPE_CHECKING:
    from greetings.application import ports

    # pyright checks each double against the port it replaces.
    _doubles: tuple[
        ports.GetConfig,
        ports.GetDefaultConfigPath,
        ports.DisplayConfig,
        ports.InitLogging,
        ports.FetchQuote,
        ports.FetchQuote,
        ports.ChooseTemplate,
        ports.ChooseTemplate,
        ports.ChooseTemplate,
    ] = (
        get_config_in_memory,
        get_default_config_path_in_memory,
        display_config_in_memory,
        init_logging_in_memory,
        fetch_quote_in_memory,
        FailingQuoteProvider(error=RuntimeError()),
        choose_first_template,
        FixedChoice(),
        CyclingChoice(),
    )

__all__ = [
    "IN_MEMORY_QUOTE",
    "CyclingChoice",
    "FailingQuoteProvider",
    "FixedChoice",
    "choose_first_template",
    "display_config_in_memory",
    "fetch_quote_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
