"""Greeting CLI command.

Contents:
    * :func:`cli_hello` - Greet one or more people.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import orjson
import rich_click as click

from greetings.domain.enums import OutputFormat
from greetings.domain.errors import EmptyNameError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("names", nargs=-1, required=True)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Print one greeting per line, or the name-to-greeting table as JSON",
)
@click.pass_context
def cli_hello(ctx: click.Context, names: tuple[str, ...], output_format: str) -> None:
    """Greet each NAME with a randomly chosen message.

    Names are greeted in the order given; a repeated name is greeted once.
    An empty NAME fails the whole command without printing anything.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello", "format": fmt.value}):
        logger.info("Greeting names", extra={"count": len(names)})
        try:
            messages = cli_ctx.services.greeter().hellos(names)
        except EmptyNameError as exc:
            logger.warning("Refused to greet an empty name")
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc

        if fmt is OutputFormat.JSON:
            click.echo(orjson.dumps(messages, option=orjson.OPT_INDENT_2).decode())
            return
        for message in messages.values():
            click.echo(message)


__all__ = ["cli_hello"]
