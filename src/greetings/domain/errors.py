"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

EMPTY_NAME_MESSAGE = "empty name"


class EmptyNameError(ValueError):
    """A greeting was requested for an empty name.

    The only failure the greeting operations produce. Inherits from
    ValueError so generic ``except ValueError`` handlers catch it too.

    Example:
        >>> from greetings.domain.errors import EmptyNameError
        >>> str(EmptyNameError())
        'empty name'
        >>> isinstance(EmptyNameError(), ValueError)
        True
    """

    def __init__(self, message: str = EMPTY_NAME_MESSAGE) -> None:
        super().__init__(message)


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when required configuration values are absent or malformed,
    for example a blank quotation text. Typically caught at CLI boundaries
    to provide user-friendly error messages.

    Example:
        >>> from greetings.domain.errors import ConfigurationError
        >>> err = ConfigurationError("No quote text configured")
        >>> str(err)
        'No quote text configured'
    """


__all__ = [
    "EMPTY_NAME_MESSAGE",
    "ConfigurationError",
    "EmptyNameError",
]
