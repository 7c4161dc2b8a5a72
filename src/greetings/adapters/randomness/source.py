"""Process-wide pseudorandom template selection.

The generator is seeded exactly once, from the nanosecond clock, when this
module is first imported. It is neither cryptographically secure nor
reproducible; tests inject a deterministic chooser instead.
"""

from __future__ import annotations

import random
import time
from collections.abc import Sequence

_GENERATOR = random.Random(time.time_ns())  # noqa: S311


def choose_template(options: Sequence[str]) -> str:
    """Return one of ``options`` selected uniformly at random.

    Args:
        options: Non-empty sequence of templates.

    Returns:
        The selected template.

    Raises:
        IndexError: If ``options`` is empty.

    Example:
        >>> choose_template(["only"])
        'only'
    """
    return _GENERATOR.choice(options)


__all__ = ["choose_template"]
