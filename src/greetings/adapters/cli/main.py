"""Error boundary around the ``greetings`` command group.

:func:`main` is what the console scripts and ``python -m greetings`` call.
It never raises for command failures: every outcome becomes an exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from greetings import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import apply_traceback_preferences, restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from greetings.composition import AppServices


def _report_unhandled(exc: BaseException) -> int:
    """Print ``exc`` through lib_cli_exit_tools and return its exit code."""
    verbose = snapshot_traceback_state().enabled
    apply_traceback_preferences(verbose)
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    # lib_cli_exit_tools.run_cli cannot hand ``obj`` to the group, so Click runs non-standalone here.
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        # Commands report their own message before exiting with a code.
        if isinstance(exc.code, int):
            return exc.code
        return _report_unhandled(exc)
    except BaseException as exc:  # KeyboardInterrupt too
        return _report_unhandled(exc)
    return 0


def _shutdown_logging() -> None:
    # A worker thread must not tear down the process-wide runtime.
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when None.
        restore_traceback: Reset ``lib_cli_exit_tools`` traceback flags afterwards.
        services_factory: Zero-argument callable returning AppServices, usually
            ``greetings.composition.build_production``.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from greetings.composition import build_testing
        >>> main(["hello", "Gladys"], services_factory=build_testing)  # doctest: +SKIP
        Hi, Gladys. Welcome!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(argv) if argv is not None else sys.argv[1:]
    previous_state = snapshot_traceback_state()
    try:
        return _invoke(args, services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        _shutdown_logging()


__all__ = ["main"]
