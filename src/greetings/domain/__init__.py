"""Greeting rules, output formats and the errors they raise.

Pure Python only: no configuration, logging or randomness lives here.
"""

from __future__ import annotations

from .behaviors import (
    GREETING_TEMPLATES,
    TemplateChooser,
    build_greeting,
    build_greetings,
)
from .enums import OutputFormat
from .errors import EMPTY_NAME_MESSAGE, ConfigurationError, EmptyNameError

__all__ = [
    # Behaviors
    "GREETING_TEMPLATES",
    "TemplateChooser",
    "build_greeting",
    "build_greetings",
    # Enums
    "OutputFormat",
    # Errors
    "EMPTY_NAME_MESSAGE",
    "ConfigurationError",
    "EmptyNameError",
]
