"""Fixtures shared by the greetings test suite.

Service factories, CLI runners and lib_cli_exit_tools state guards live
here so individual test modules only describe behaviour.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

if TYPE_CHECKING:
    from greetings.application.ports import ChooseTemplate, FetchQuote
    from greetings.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when asserting on command output so log lines
    written to stderr never interfere.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests that need real adapters."""
    from greetings.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test.

    Only clears before, so a monkeypatched loader never loses ``cache_clear``.
    """
    from greetings.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    """Create SourceInfo dicts for provenance-tracking tests."""

    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


@pytest.fixture
def inject_services(
    clear_config_cache: None,
) -> Callable[..., Callable[[], AppServices]]:
    """Return a builder for services factories with selected ports replaced.

    Unreplaced ports keep their production adapters, so tests only swap the
    boundary they care about.

    Example:
        def test_quote(cli_runner, inject_services) -> None:
            factory = inject_services(fetch_quote=lambda config: "Hi")
            result = cli_runner.invoke(cli, ["quote"], obj=factory)
            assert result.stdout == "Hi\\n"
    """
    from greetings.composition import build_production

    def _inject(
        *,
        config: Config | None = None,
        choose_template: ChooseTemplate | None = None,
        fetch_quote: FetchQuote | None = None,
    ) -> Callable[[], AppServices]:
        changes: dict[str, Any] = {}
        if config is not None:
            changes["get_config"] = lambda **_kwargs: config
        if choose_template is not None:
            changes["choose_template"] = choose_template
        if fetch_quote is not None:
            changes["fetch_quote"] = fetch_quote
        test_services = replace(build_production(), **changes)
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every ``profile`` it receives."""
    from greetings.composition import build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        test_services = replace(build_production(), get_config=_capturing_get_config)
        return lambda: test_services

    return _inject


@pytest.fixture
def testing_factory() -> Callable[..., Callable[[], AppServices]]:
    """Return a builder around ``build_testing`` for CLI runs.

    Config, quotes and template choice stay in memory; logging keeps the
    real initialiser so commands can bind lib_log_rich context.
    """
    from greetings.adapters.logging import init_logging
    from greetings.composition import build_testing

    def _inject(**kwargs: Any) -> Callable[[], AppServices]:
        services = replace(build_testing(**kwargs), init_logging=init_logging)
        return lambda: services

    return _inject
