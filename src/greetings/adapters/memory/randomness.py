"""Deterministic template choosers for testing.

Stand in for the time-seeded production chooser so greeting output can be
asserted exactly.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(slots=True)
class FixedChoice:
    """Always pick the template at ``index`` and record every offer.

    Example:
        >>> chooser = FixedChoice(index=1)
        >>> chooser(["a", "b", "c"])
        'b'
        >>> chooser.calls
        1
    """

    index: int = 0
    calls: int = 0

    def __call__(self, options: Sequence[str]) -> str:
        self.calls += 1
        return options[self.index]


@dataclass(slots=True)
class CyclingChoice:
    """Walk through the templates in order, wrapping around.

    Example:
        >>> chooser = CyclingChoice()
        >>> [chooser(["a", "b"]) for _ in range(3)]
        ['a', 'b', 'a']
    """

    position: int = 0
    history: list[str] = field(default_factory=list)

    def __call__(self, options: Sequence[str]) -> str:
        picked = options[self.position % len(options)]
        self.position += 1
        self.history.append(picked)
        return picked


def choose_first_template(options: Sequence[str]) -> str:
    """Return the first template -- satisfies the ChooseTemplate protocol."""
    return options[0]


__all__ = [
    "CyclingChoice",
    "FixedChoice",
    "choose_first_template",
]
