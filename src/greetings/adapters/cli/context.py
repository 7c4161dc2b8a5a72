"""State shared between the root group and its subcommands.

The root group swaps Click's ``ctx.obj`` (the services factory) for a
:class:`CLIContext`. The traceback helpers keep ``lib_cli_exit_tools.config``
in step with ``--traceback`` and let :func:`.main.main` undo that afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from greetings.composition import AppServices


class TracebackState(NamedTuple):
    """Traceback flags of ``lib_cli_exit_tools.config`` at one point in time."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """What every greetings subcommand needs from the root group."""

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace ``ctx.obj`` with a :class:`CLIContext`.

    ``set_overrides`` is kept verbatim so ``config --profile`` can reapply it
    after reloading.
    """
    ctx.obj = CLIContext(traceback, config, services, profile, set_overrides)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root group.

    Raises:
        RuntimeError: If the root group did not run first.
    """
    cli_ctx = ctx.obj
    if isinstance(cli_ctx, CLIContext):
        return cli_ctx
    raise RuntimeError("CLI context not initialized. Call store_cli_context first.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full (coloured) tracebacks on or off for the error boundary.

    Example:
        >>> apply_traceback_preferences(True)
        >>> snapshot_traceback_state()
        TracebackState(enabled=True, force_color=True)
        >>> apply_traceback_preferences(False)
    """
    flag = bool(enabled)
    lib_cli_exit_tools.config.traceback = flag
    lib_cli_exit_tools.config.traceback_force_color = flag


def snapshot_traceback_state() -> TracebackState:
    """Read the current traceback flags."""
    cfg = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(cfg, "traceback", False)),
        force_color=bool(getattr(cfg, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Put back flags captured by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
