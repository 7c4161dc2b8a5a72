"""Pure domain functions with no I/O or framework dependencies.

Template selection is supplied by the caller as a ``choose`` callable so the
domain never touches process-wide random state.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Final

from .errors import EmptyNameError

GREETING_TEMPLATES: Final[tuple[str, ...]] = (
    "Hi, {name}. Welcome!",
    "Great to see you, {name}!",
    "Hail, {name}! Well met!",
)
"""Fixed greeting shapes; ``{name}`` is replaced with the greeted name."""

TemplateChooser = Callable[[Sequence[str]], str]
"""Callable that picks one template out of the offered options."""


def build_greeting(name: str, *, choose: TemplateChooser) -> str:
    r"""Return a greeting for ``name`` using a template picked by ``choose``.

    Args:
        name: Person to greet. Must not be empty.
        choose: Selects one entry from :data:`GREETING_TEMPLATES`.

    Returns:
        The chosen template with ``name`` substituted.

    Raises:
        EmptyNameError: If ``name`` is the empty string.

    Example:
        >>> build_greeting("Gladys", choose=lambda options: options[0])
        'Hi, Gladys. Welcome!'
        >>> build_greeting("", choose=lambda options: options[0])
        Traceback (most recent call last):
        ...
        greetings.domain.errors.EmptyNameError: empty name
    """
    if not name:
        raise EmptyNameError()
    template = choose(GREETING_TEMPLATES)
    return template.format(name=name)


def build_greetings(names: Iterable[str], *, choose: TemplateChooser) -> dict[str, str]:
    r"""Return a mapping of each name to its greeting.

    Names are processed in order. The first empty name aborts the whole
    call; greetings built for earlier names are discarded. Repeated names
    keep the greeting generated last.

    Args:
        names: People to greet.
        choose: Selects one entry from :data:`GREETING_TEMPLATES` per name.

    Returns:
        Dictionary keyed by name.

    Raises:
        EmptyNameError: If any name is the empty string.

    Example:
        >>> build_greetings(["Alice", "Bob"], choose=lambda options: options[1])
        {'Alice': 'Great to see you, Alice!', 'Bob': 'Great to see you, Bob!'}
    """
    messages: dict[str, str] = {}
    for name in names:
        messages[name] = build_greeting(name, choose=choose)
    return messages


__all__ = [
    "GREETING_TEMPLATES",
    "TemplateChooser",
    "build_greeting",
    "build_greetings",
]
