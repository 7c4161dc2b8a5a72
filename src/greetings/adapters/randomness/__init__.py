"""Randomness adapter - process-wide template selection.

Contents:
    * :func:`.source.choose_template` - Uniform choice from a time-seeded generator
"""

from __future__ import annotations

from .source import choose_template

__all__ = ["choose_template"]
