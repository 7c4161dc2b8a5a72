"""The ``greetings`` command group and its global options.

``--traceback``, ``--profile`` and ``--set`` are handled here once, before
any subcommand runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from greetings import __init__conf__
from greetings.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from greetings.composition import AppServices


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Load ``profile`` and merge ``--set`` overrides on top.

    Raises:
        click.UsageError: If an override is malformed or would replace a
            scalar with a nested table.
    """
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full traceback when a command fails")
@click.option("--profile", default=None, help="Read configuration from profile/<NAME>/ (e.g. 'test')")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one setting, e.g. quote.text='Clear is better than clever.' (repeatable)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration, start logging and hand both to the subcommand.

    Prints help when no subcommand is given.
    """
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = factory()
    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx, traceback=traceback, config=config, services=services, profile=profile, set_overrides=set_overrides
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Commands import from packages above this module, so registration waits until ``cli`` exists.
def _register_commands() -> None:
    from .commands import cli_config, cli_hello, cli_info, cli_quote

    for command in (cli_hello, cli_quote, cli_info, cli_config):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
