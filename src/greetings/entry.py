"""Console script targets declared in pyproject.toml.

Both wire production services here so the CLI package never imports the
composition root.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run ``greetings`` with production services; returns the exit code."""
    return cli_main(services_factory=build_production)


def quote_main() -> int:
    """Print the configured quotation; ignores command-line arguments.

    Returns:
        Exit code from CLI execution (0 on success).
    """
    return cli_main(["quote"], services_factory=build_production)


__all__ = ["main", "quote_main"]
