"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml`` so the CLI can report them without
importing ``importlib.metadata`` at runtime.

Contents:
    * Metadata constants (name, title, version, ...)
    * ``LAYEREDCONF_*`` identifiers used for configuration path discovery
    * :func:`print_info` - Render the metadata block for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name declared in pyproject.toml.
name = "greetings"
#: Human-readable summary shown in CLI help output.
title = "Random greetings for named people, and a quotation printer"
#: Current release version pulled from pyproject.toml.
version = "1.0.0"
#: Repository homepage.
homepage = "https://github.com/greetings-dev/greetings"
#: Author attribution.
author = "greetings developers"
#: Contact email.
author_email = "dev@greetings.invalid"
#: Console-script name published by the package.
shell_command = "greetings"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: str = "greetings"
#: Application display name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: str = "greetings"
#: Configuration slug for lib_layered_config Linux paths and environment variables.
LAYEREDCONF_SLUG: str = "greetings"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greetings:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
