"""In-memory quotation providers for testing."""

from __future__ import annotations

from dataclasses import dataclass

from lib_layered_config import Config

IN_MEMORY_QUOTE = "Clear is better than clever."


def fetch_quote_in_memory(config: Config) -> str:
    """Return a fixed quotation -- satisfies the FetchQuote protocol."""
    return IN_MEMORY_QUOTE


@dataclass(slots=True)
class FailingQuoteProvider:
    """Provider that raises ``error`` on every call.

    Used to show that provider failures reach the caller untouched.
    """

    error: Exception

    def __call__(self, config: Config) -> str:
        raise self.error


__all__ = [
    "IN_MEMORY_QUOTE",
    "FailingQuoteProvider",
    "fetch_quote_in_memory",
]
