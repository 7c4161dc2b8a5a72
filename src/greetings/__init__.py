"""Random greetings for named people.

>>> from greetings import build_greeter
>>> build_greeter(lambda options: options[-1]).hellos(["Alice", "Bob"])
{'Alice': 'Hail, Alice! Well met!', 'Bob': 'Hail, Bob! Well met!'}
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .adapters.config.loader import get_config
from .application.greeter import Greeter
from .composition import build_greeter
from .domain.behaviors import GREETING_TEMPLATES, build_greeting, build_greetings
from .domain.errors import EmptyNameError

__all__ = [
    "GREETING_TEMPLATES",
    "EmptyNameError",
    "Greeter",
    "build_greeter",
    "build_greeting",
    "build_greetings",
    "get_config",
    "print_info",
]
