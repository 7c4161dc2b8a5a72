"""Use cases and the ports they depend on.

:class:`.greeter.Greeter` turns names into greetings; :mod:`.ports` lists
the callables adapters must provide.
"""

from __future__ import annotations

from .greeter import Greeter
from .ports import (
    ChooseTemplate,
    DisplayConfig,
    FetchQuote,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
)

__all__ = [
    "ChooseTemplate",
    "DisplayConfig",
    "FetchQuote",
    "GetConfig",
    "GetDefaultConfigPath",
    "Greeter",
    "InitLogging",
]
