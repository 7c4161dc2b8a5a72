"""Greeter use case stories: injected chooser, public package surface."""

from __future__ import annotations

import pytest

import greetings
from greetings.adapters.memory import CyclingChoice, FixedChoice
from greetings.application.greeter import Greeter
from greetings.composition import build_greeter
from greetings.domain.errors import EmptyNameError


@pytest.mark.os_agnostic
def test_hello_uses_the_injected_chooser() -> None:
    """The chooser given at construction decides the template."""
    greeter = Greeter(choose=FixedChoice(index=2))

    assert greeter.hello("Gladys") == "Hail, Gladys! Well met!"


@pytest.mark.os_agnostic
def test_hello_rejects_empty_name() -> None:
    """Empty input surfaces the domain error unchanged."""
    with pytest.raises(EmptyNameError):
        Greeter(choose=FixedChoice()).hello("")


@pytest.mark.os_agnostic
def test_hellos_builds_table() -> None:
    """Multiple names produce a table keyed by name."""
    greeter = Greeter(choose=CyclingChoice())

    assert greeter.hellos(["Alice", "Bob"]) == {
        "Alice": "Hi, Alice. Welcome!",
        "Bob": "Great to see you, Bob!",
    }


@pytest.mark.os_agnostic
def test_hellos_returns_no_partial_table() -> None:
    """A late empty name fails the whole call."""
    with pytest.raises(EmptyNameError):
        Greeter(choose=FixedChoice()).hellos(["Alice", "Bob", ""])


@pytest.mark.os_agnostic
def test_greeter_is_immutable() -> None:
    """The chooser cannot be swapped after construction."""
    greeter = Greeter(choose=FixedChoice())

    with pytest.raises(AttributeError):
        greeter.choose = FixedChoice(index=1)  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_build_greeter_defaults_to_production_chooser() -> None:
    """Without an argument the time-seeded chooser is wired in."""
    from greetings.adapters.randomness import choose_template

    assert build_greeter().choose is choose_template


@pytest.mark.os_agnostic
def test_build_greeter_accepts_a_deterministic_chooser() -> None:
    """Tests can substitute their own chooser."""
    greeter = build_greeter(FixedChoice(index=1))

    assert greeter.hello("Gladys") == "Great to see you, Gladys!"


@pytest.mark.os_agnostic
def test_package_surface_greets_with_production_wiring() -> None:
    """The top-level package exposes a working greeter."""
    greeting = greetings.build_greeter().hello("Gladys")

    assert greeting in {template.format(name="Gladys") for template in greetings.GREETING_TEMPLATES}
