"""``--set SECTION.KEY=VALUE`` assignments layered over loaded configuration.

Values are decoded as JSON when they parse (``8192``, ``true``, ``["a"]``)
and kept as text otherwise, so ``--set lib_log_rich.console_level=DEBUG``
needs no quoting.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, NamedTuple

import orjson
from lib_layered_config import Config


class Override(NamedTuple):
    """One ``--set`` assignment: the dotted path, section first, and its value."""

    path: tuple[str, ...]
    value: Any


def parse_override(raw: str) -> Override:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into path and value.

    Only the first ``=`` ends the path, so values may contain ``=``.

    Args:
        raw: The text given to ``--set``.

    Returns:
        The path segments and the coerced value.

    Raises:
        ValueError: If ``=`` is missing, the path names no key below a
            section, or a path segment is empty.

    Examples:
        >>> parse_override("lib_log_rich.console_level=DEBUG")
        Override(path=('lib_log_rich', 'console_level'), value='DEBUG')
        >>> parse_override("a.b=x=y").value
        'x=y'
    """
    dotted, sep, text = raw.partition("=")
    if not sep:
        raise ValueError(f"{raw!r} is not SECTION.KEY=VALUE: '=' is missing")
    path = tuple(dotted.split("."))
    if len(path) < 2:
        raise ValueError(f"{raw!r} is not SECTION.KEY=VALUE: key needs a section")
    if not all(path):
        raise ValueError(f"{raw!r} is not SECTION.KEY=VALUE: {dotted!r} has an empty segment")
    return Override(path, coerce_value(text))


def coerce_value(text: str) -> Any:
    """Return *text* decoded as JSON, or *text* itself when it is not JSON.

    Examples:
        >>> coerce_value("8192"), coerce_value("false"), coerce_value("null")
        (8192, False, None)
        >>> coerce_value("INFO"), coerce_value("")
        ('INFO', '')
    """
    try:
        return orjson.loads(text)
    except ValueError:  # orjson.JSONDecodeError
        return text


def merge_overrides(config: Config, raw_overrides: Iterable[str]) -> Config:
    """Return *config* with every ``--set`` assignment deep-merged in.

    Assignments apply in order, so a later one wins for the same path.
    *config* itself is never changed; with nothing to apply it is returned
    as is.

    Args:
        config: Configuration as read from the layers.
        raw_overrides: ``--set`` values in command-line order.

    Returns:
        The merged configuration.

    Raises:
        ValueError: If an assignment is malformed, or nests below a path an
            earlier assignment set to a scalar.

    Examples:
        >>> base = Config({"s": {"k": 1, "keep": True}}, {})
        >>> merged = merge_overrides(base, ["s.k=2", "s.new.deep=[1]"])
        >>> merged["s"]["k"], merged["s"]["keep"], merged["s"]["new"]["deep"]
        (2, True, [1])
        >>> merge_overrides(base, []) is base
        True
    """
    tree: dict[str, Any] = {}
    for raw in raw_overrides:
        path, value = parse_override(raw)
        node = tree
        for segment in path[:-1]:
            child = node.setdefault(segment, {})
            if not isinstance(child, dict):
                raise ValueError(f"{raw!r} nests below {segment!r}, which an earlier --set made a scalar")
            node = child
        node[path[-1]] = value
    return config.with_overrides(tree) if tree else config


__all__ = ["Override", "coerce_value", "merge_overrides", "parse_override"]
