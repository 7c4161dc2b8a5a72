"""CLI hello stories: single and multiple names, JSON output, empty names."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import orjson
import pytest
from click.testing import CliRunner, Result

from greetings.adapters import cli as cli_mod
from greetings.adapters.cli.exit_codes import ExitCode
from greetings.adapters.memory import CyclingChoice, FixedChoice
from greetings.domain.behaviors import GREETING_TEMPLATES


@pytest.mark.os_agnostic
def test_hello_greets_a_single_name(
    cli_runner: CliRunner,
    testing_factory: Callable[..., Callable[[], Any]],
) -> None:
    """One name prints exactly one greeting line."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["hello", "Gladys"], obj=testing_factory())

    assert result.exit_code == 0
    assert result.stdout == "Hi, Gladys. Welcome!\n"


@pytest.mark.os_agnostic
def test_hello_greets_names_in_order(
    cli_runner: CliRunner,
    testing_factory: Callable[..., Callable[[], Any]],
) -> None:
    """Each name gets its own line in input order."""
    factory = testing_factory(chooser=CyclingChoice())

    result: Result = cli_runner.invoke(cli_mod.cli, ["hello", "Alice", "Bob", "Carol"], obj=factory)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "Hi, Alice. Welcome!",
        "Great to see you, Bob!",
        "Hail, Carol! Well met!",
    ]


@pytest.mark.os_agnostic
def test_hello_greets_a_repeated_name_once(
    cli_runner: CliRunner,
    testing_factory: Callable[..., Callable[[], Any]],
) -> None:
    """A duplicate name collapses to its last greeting."""
    factory = testing_factory(chooser=CyclingChoice())

    result: Result = cli_runner.invoke(cli_mod.cli, ["hello", "Alice", "Bob", "Alice"], obj=factory)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["Hail, Alice! Well met!", "Great to see you, Bob!"]


@pytest.mark.os_agnostic
def test_hello_json_prints_the_greeting_table(
    cli_runner: CliRunner,
    testing_factory: Callable[..., Callable[[], Any]],
) -> None:
    """--format json prints the name-to-greeting mapping."""
    factory = testing_factory(chooser=FixedChoice(index=1))

    result: Result = cli_runner.invoke(cli_mod.cli, ["hello", "--format", "json", "Alice", "Bob"], obj=factory)

    assert result.exit_code == 0
    assert orjson.loads(result.stdout) == {
        "Alice": "Great to see you, Alice!",
        "Bob": "Great to see you, Bob!",
    }


@pytest.mark.os_agnostic
@pytest.mark.parametrize("names", [[""], ["Alice", ""], ["", "Bob"]])
def test_hello_rejects_empty_names(
    names: list[str],
    cli_runner: CliRunner,
    testing_factory: Callable[..., Callable[[], Any]],
) -> None:
    """Any empty name exits with INVALID_ARGUMENT and prints no greeting."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["hello", *names], obj=testing_factory())

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert result.stdout == ""
    assert "empty name" in result.stderr


@pytest.mark.os_agnostic
def test_hello_requires_at_least_one_name(
    cli_runner: CliRunner,
    testing_factory: Callable[..., Callable[[], Any]],
) -> None:
    """Omitting NAME is a usage error."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["hello"], obj=testing_factory())

    assert result.exit_code == 2
    assert "Missing argument" in result.output


@pytest.mark.os_agnostic
def test_hello_with_production_wiring_uses_a_known_template(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """The real chooser picks one of the three shapes."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["hello", "Gladys"], obj=production_factory)

    assert result.exit_code == 0
    assert result.stdout.strip() in {template.format(name="Gladys") for template in GREETING_TEMPLATES}
