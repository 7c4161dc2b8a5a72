"""Quotation provider adapter.

Contents:
    * :func:`.provider.fetch_quote` - Read the quotation from layered configuration
"""

from __future__ import annotations

from .provider import QuoteConfigModel, fetch_quote

__all__ = ["QuoteConfigModel", "fetch_quote"]
