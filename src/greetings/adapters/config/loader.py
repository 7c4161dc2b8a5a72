"""Layered configuration loading for greetings.

``get_config`` reads the bundled defaults plus every app, host, user,
dotenv and environment layer that lib_layered_config discovers, once per
``(profile, start_dir)``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from greetings import __init__conf__

_DEFAULT_CONFIG_PATH = Path(__file__).with_name("defaultconfig.toml")


def validate_profile(profile: str, max_length: int = DEFAULT_MAX_PROFILE_LENGTH) -> None:
    """Reject profile names that are too long or could escape the config tree.

    Raises:
        ValueError: If the profile name is invalid.

    Examples:
        >>> validate_profile("staging-v2")

        >>> validate_profile("../etc/passwd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc/passwd
    """
    validate_profile_name(profile, max_length=max_length)


def get_default_config_path() -> Path:
    """Return the ``defaultconfig.toml`` shipped inside the package.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return _DEFAULT_CONFIG_PATH


@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration for ``profile``.

    Precedence (lowest first): defaults -> app -> host -> user -> dotenv -> env.
    A profile inserts ``profile/<name>/`` into every file location. Results
    are cached; call ``get_config.cache_clear()`` to force a reread. Invalid
    profiles raise before any file is touched and are never cached.

    Args:
        profile: Optional profile name such as ``"test"`` or ``"production"``.
        start_dir: Directory that seeds ``.env`` discovery; cwd when None.

    Raises:
        ValueError: If ``profile`` is not a valid profile name.

    Example:
        >>> get_config().get("quote", default={})["text"]  # doctest: +ELLIPSIS
        "Don't communicate by sharing memory..."
    """
    if profile is not None:
        validate_profile(profile)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=_DEFAULT_CONFIG_PATH,
        start_dir=start_dir,
    )


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
