"""Greeting use case binding the domain builders to a template chooser."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ..domain.behaviors import build_greeting, build_greetings
from .ports import ChooseTemplate

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Greeter:
    """Greeting service with its random-selection capability injected.

    Attributes:
        choose: Picks one template per greeting. Production wiring uses the
            time-seeded generator; tests pass a deterministic chooser.

    Example:
        >>> greeter = Greeter(choose=lambda options: options[2])
        >>> greeter.hello("Gladys")
        'Hail, Gladys! Well met!'
    """

    choose: ChooseTemplate

    def hello(self, name: str) -> str:
        """Return a greeting for a single name.

        Raises:
            EmptyNameError: If ``name`` is empty.
        """
        message = build_greeting(name, choose=self.choose)
        logger.debug("Built greeting", extra={"greeted": name})
        return message

    def hellos(self, names: Iterable[str]) -> dict[str, str]:
        """Return a name-to-greeting table; any empty name fails the whole call.

        Raises:
            EmptyNameError: If any name is empty. No partial table is returned.
        """
        messages = build_greetings(names, choose=self.choose)
        logger.debug("Built greeting table", extra={"entries": len(messages)})
        return messages


__all__ = ["Greeter"]
