"""Quotation provider backed by the ``[quote]`` configuration section.

The bundled ``defaultconfig.toml`` ships a Go proverb; user, host, app,
``.env`` or environment layers (and ``--set quote.text=...``) replace it.
"""

from __future__ import annotations

import logging
from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, field_validator

from greetings.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


class QuoteConfigModel(BaseModel):
    """Pydantic model for [quote] config section validation.

    Example:
        >>> QuoteConfigModel(text="Clear is better than clever.").text
        'Clear is better than clever.'
        >>> QuoteConfigModel().text
        ''
        >>> QuoteConfigModel(text=1984).text, QuoteConfigModel(text=True).text
        ('1984', 'true')
    """

    text: str = ""

    model_config = ConfigDict(extra="ignore")

    @field_validator("text", mode="before")
    @classmethod
    def _scalar_as_text(cls, value: object) -> object:
        # Env and --set layers decode JSON literals; a quote may still read "42" or "true".
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int | float):
            return str(value)
        return value


def fetch_quote(config: Config) -> str:
    """Return the configured quotation as a single line of text.

    Args:
        config: Already-loaded layered configuration object.

    Returns:
        The quotation with runs of whitespace, newlines included, collapsed
        to single spaces so it always prints as one line.

    Raises:
        ConfigurationError: If no quotation text is configured.
        pydantic.ValidationError: If the ``[quote]`` section is malformed.

    Example:
        >>> fetch_quote(Config({"quote": {"text": "Errors are values."}}, {}))
        'Errors are values.'
    """
    raw: object = config.get("quote", default={})
    parsed = QuoteConfigModel.model_validate(cast("dict[str, object]", raw) if raw else {})
    text = " ".join(parsed.text.split())
    if not text:
        raise ConfigurationError("No quote text configured (set [quote] text)")
    logger.debug("Resolved quotation", extra={"chars": len(text)})
    return text


__all__ = [
    "QuoteConfigModel",
    "fetch_quote",
]
