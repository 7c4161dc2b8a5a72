"""``greetings info``: show the installed distribution's metadata."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greetings import __init__conf__

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Show name, version, homepage and author of this installation."""
    extra = {"command": "info", "version": __init__conf__.version}
    with lib_log_rich.runtime.bind(job_id="cli-info", extra=extra):
        logger.info("Printing package metadata")
        __init__conf__.print_info()


__all__ = ["cli_info"]
