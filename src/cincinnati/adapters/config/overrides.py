"""Parse ``--set SECTION.KEY=VALUE`` strings and merge them into a Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Python values an override string can turn into."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` entry."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def coerce_value(raw: str) -> CoercedValue:
    """Interpret *raw* as JSON, keeping it as a plain string when that fails.

    Examples:
        >>> coerce_value("false")
        False
        >>> coerce_value("8")
        8
        >>> coerce_value('["a"]')
        ['a']
        >>> coerce_value("DEBUG")
        'DEBUG'
        >>> coerce_value("")
        ''
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a :class:`ConfigOverride`.

    The first ``=`` ends the dotted path; the first ``.`` ends the section.

    Args:
        raw: Override string as typed on the command line.

    Returns:
        Parsed override with its value coerced by :func:`coerce_value`.

    Raises:
        ValueError: If ``=`` or the section dot is missing, or any path
            component is empty.

    Examples:
        >>> parse_override("cincinnati.log_salutations=false")
        ConfigOverride(section='cincinnati', key_path=('log_salutations',), value=False)
        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path
        ('payload_limits', 'max_chars')
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    section, dot, key = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")

    key_path = tuple(key.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Write *override* into the nested mapping *target*, creating levels on demand.

    Raises:
        TypeError: If an intermediate key already holds a non-mapping value.

    Example:
        >>> tree: dict[str, dict[str, object]] = {}
        >>> _nest_override(tree, ConfigOverride("s", ("a", "b"), 1))
        >>> tree
        {'s': {'a': {'b': 1}}}
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for part in parents:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return *config* with every ``--set`` entry deep-merged on top.

    Args:
        config: Configuration loaded from file and environment layers.
        raw_overrides: ``SECTION.KEY=VALUE`` strings, applied in order.

    Returns:
        A new Config, or *config* itself when there is nothing to apply.

    Raises:
        ValueError: If any override string is malformed.

    Example:
        >>> cfg = Config({"cincinnati": {"log_salutations": True}}, {})
        >>> apply_overrides(cfg, ("cincinnati.log_salutations=false",))["cincinnati"]["log_salutations"]
        False
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    merged: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(merged, parse_override(raw))
    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
