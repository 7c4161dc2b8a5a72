"""Implementations of the application ports.

* :mod:`.cli` - the ``greetings`` command group (rich-click)
* :mod:`.config` - lib_layered_config loading, ``--set`` overrides, display
* :mod:`.logging` - lib_log_rich bootstrap
* :mod:`.quotes` - quotation text read from configuration
* :mod:`.randomness` - clock-seeded template choice
* :mod:`.memory` - doubles used by ``build_testing``
"""

from __future__ import annotations

__all__: list[str] = []
