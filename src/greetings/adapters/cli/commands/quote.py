"""Quotation CLI command.

Contents:
    * :func:`cli_quote` - Print the quotation from the injected provider.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greetings.domain.errors import ConfigurationError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("quote", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_quote(ctx: click.Context) -> None:
    """Print a quotation as a single line."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-quote", extra={"command": "quote"}):
        logger.info("Fetching quotation")
        try:
            text = cli_ctx.services.fetch_quote(cli_ctx.config)
        except ConfigurationError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc
        click.echo(text)


__all__ = ["cli_quote"]
