"""Enumerations shared by the domain and the CLI."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How ``hello`` and ``config`` print their results.

    Members compare equal to their plain string values, which is what Click
    hands over from ``--format``.

    Example:
        >>> OutputFormat("json") is OutputFormat.JSON
        True
        >>> OutputFormat.HUMAN == "human"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = ["OutputFormat"]
