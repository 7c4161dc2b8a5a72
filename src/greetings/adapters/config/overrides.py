"""``--set SECTION.KEY=VALUE`` support for the ``greetings`` root group.

Values are decoded as JSON when they parse (``true``, ``8192``, ``["a"]``)
and kept as text otherwise, so ``--set quote.text=Clear is better than
clever.`` needs no extra quoting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

OverrideValue = str | int | float | bool | None | list[object] | dict[str, object]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One decoded ``--set`` argument."""

    section: str
    key_path: tuple[str, ...]
    value: OverrideValue

    def as_tree(self) -> dict[str, object]:
        """Return the override as nested tables rooted at ``section``.

        Example:
            >>> ConfigOverride("lib_log_rich", ("payload_limits", "max_chars"), 10).as_tree()
            {'lib_log_rich': {'payload_limits': {'max_chars': 10}}}
        """
        tree: object = self.value
        for key in reversed((self.section, *self.key_path)):
            tree = {key: tree}
        return cast("dict[str, object]", tree)


def parse_override(raw: str) -> ConfigOverride:
    """Decode one ``--set`` argument.

    Everything after the first ``=`` is the value.

    Raises:
        ValueError: If ``=`` is missing, no key follows the section, or a
            dotted component is empty.

    Examples:
        >>> parse_override("quote.text=a=b")
        ConfigOverride(section='quote', key_path=('text',), value='a=b')
        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").value
        8192
    """
    dotted, has_value, text = raw.partition("=")
    if not has_value:
        raise ValueError(f"--set {raw!r} must contain '=' (SECTION.KEY=VALUE)")

    section, *keys = dotted.split(".")
    if not keys:
        raise ValueError(f"--set {raw!r}: {dotted!r} must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"--set {raw!r}: section name is empty")
    if "" in keys:
        raise ValueError(f"--set {raw!r}: key path has an empty component")

    return ConfigOverride(section, tuple(keys), coerce_value(text))


def coerce_value(text: str) -> OverrideValue:
    """Return the JSON value ``text`` spells, or ``text`` itself.

    Examples:
        >>> coerce_value("false"), coerce_value("3"), coerce_value("INFO")
        (False, 3, 'INFO')
        >>> coerce_value("")
        ''
    """
    if not text:
        return text
    try:
        decoded = orjson.loads(text)
    except orjson.JSONDecodeError:
        return text
    return cast(OverrideValue, decoded)


def _merge_into(tree: dict[str, object], addition: dict[str, object], trail: tuple[str, ...] = ()) -> None:
    """Deep-merge ``addition`` into ``tree``; later scalars replace earlier ones.

    Raises:
        TypeError: If ``addition`` nests below a key that already holds a scalar.
    """
    for key, value in addition.items():
        if not isinstance(value, dict) or key not in tree:
            tree[key] = value
            continue
        current = tree[key]
        if not isinstance(current, dict):
            dotted = ".".join((*trail, key))
            raise TypeError(f"Expected dict at key {dotted!r}, got {type(current).__name__}")
        _merge_into(cast("dict[str, object]", current), cast("dict[str, object]", value), (*trail, key))


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` argument merged on top.

    ``config`` itself is returned when there is nothing to apply.

    Raises:
        ValueError: If an argument is malformed.
        TypeError: If two arguments disagree about whether a key is a table.

    Examples:
        >>> cfg = Config({"quote": {"text": "a"}}, {})
        >>> apply_overrides(cfg, ("quote.text=b",))["quote"]["text"]
        'b'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    merged: dict[str, object] = {}
    for raw in raw_overrides:
        _merge_into(merged, parse_override(raw).as_tree())
    return config.with_overrides(merged) if merged else config


__all__ = [
    "ConfigOverride",
    "OverrideValue",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
