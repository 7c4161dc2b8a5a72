"""Exit statuses returned by ``greetings`` commands."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit statuses for the error paths commands handle themselves.

    Unhandled exceptions get their status from ``lib_cli_exit_tools``.

    * ``INVALID_ARGUMENT`` (22, ``EINVAL``): an empty name or unknown config section
    * ``CONFIG_ERROR`` (78, ``EX_CONFIG``): no quotation text configured

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
