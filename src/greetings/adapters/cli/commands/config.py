"""``greetings config``: show where every setting came from."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from greetings.adapters.config.overrides import apply_overrides
from greetings.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _config_for_profile(cli_ctx: CLIContext, profile: str | None) -> tuple[Config, str | None]:
    """Reload for ``profile`` (keeping ``--set``), or reuse the root group's config."""
    if not profile:
        return cli_ctx.config, cli_ctx.profile
    reloaded = cli_ctx.services.get_config(profile=profile)
    return apply_overrides(reloaded, cli_ctx.set_overrides), profile


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([member.value for member in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    show_default=True,
    help="Render as annotated TOML-like text or as JSON",
)
@click.option("--section", default=None, help="Render only this section, e.g. 'quote'")
@click.option("--profile", default=None, help="Reload configuration for this profile before rendering")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Print the merged configuration.

    Layers, lowest first: defaults, app, host, user, .env, environment.
    """
    cli_ctx = get_cli_context(ctx)
    config, active_profile = _config_for_profile(cli_ctx, profile)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-config", extra={"command": "config", "profile": active_profile}):
        logger.info("Rendering configuration", extra={"format": fmt.value, "section": section})
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=active_profile)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
