"""Parse and apply ``--set SECTION.KEY=VALUE`` overrides to the ambient Config.

Overrides only reach ambient settings such as ``[lib_log_rich]``; the emitted
configuration file is fixed and never consults them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""

OverrideTree = dict[str, dict[str, object]]
"""Nested ``{section: {key: ...}}`` mapping handed to ``Config.with_overrides``."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` value addressed by section and key path."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue

    @property
    def dotted_key(self) -> str:
        """Return the full dotted key, e.g. ``lib_log_rich.console_level``."""
        return ".".join((self.section, *self.key_path))


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE`` into a :class:`ConfigOverride`.

    Only the first ``=`` splits key from value, so values may contain ``=``.

    Raises:
        ValueError: If ``=`` is missing, the key has no dot, or any dotted
            component is empty.

    Examples:
        >>> parse_override("lib_log_rich.console_level=DEBUG").dotted_key
        'lib_log_rich.console_level'
        >>> parse_override("lib_log_rich.queue_enabled=false").value
        False
    """
    key, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    if "." not in key:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *key_path = key.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(key_path), value=coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """Interpret ``raw`` as a JSON literal, falling back to the plain string.

    Examples:
        >>> coerce_value("true"), coerce_value("10"), coerce_value("INFO")
        (True, 10, 'INFO')
        >>> coerce_value("")
        ''
    """
    if not raw:
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def build_override_tree(overrides: list[ConfigOverride]) -> OverrideTree:
    """Fold parsed overrides into one nested mapping; later entries win.

    Raises:
        ValueError: If an override descends into a key that an earlier
            override already set to a scalar.

    Example:
        >>> tree = build_override_tree([parse_override("a.b.c=1"), parse_override("a.d=2")])
        >>> tree
        {'a': {'b': {'c': 1}, 'd': 2}}
    """
    tree: OverrideTree = {}
    for override in overrides:
        node: dict[str, object] = tree.setdefault(override.section, {})
        for part in override.key_path[:-1]:
            child = node.setdefault(part, {})
            if not isinstance(child, dict):
                raise ValueError(f"Cannot override {override.dotted_key!r}: {part!r} is already set to a scalar value")
            node = cast("dict[str, object]", child)
        node[override.key_path[-1]] = override.value
    return tree


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` override merged in.

    Args:
        config: Configuration loaded from file/env layers.
        raw_overrides: ``SECTION.KEY=VALUE`` strings in command-line order.

    Returns:
        A new Config, or ``config`` itself when there is nothing to apply.

    Raises:
        ValueError: If any override is malformed.
    """
    if not raw_overrides:
        return config
    tree = build_override_tree([parse_override(raw) for raw in raw_overrides])
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "OverrideTree",
    "apply_overrides",
    "build_override_tree",
    "coerce_value",
    "parse_override",
]
