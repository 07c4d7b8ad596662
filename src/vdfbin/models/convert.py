"""Conversion between value trees and plain Python objects.

``to_python`` produces JSON-serializable dicts; ``from_python`` is the only place
where untyped values are interpreted as nodes. The encoder itself only accepts
the three node types.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..codec.config import CodecConfig, resolve
from ..exceptions import DepthExceededError, EncodeError
from .nodes import U32_MAX, Entries, MapNode, NumberNode, StringNode, Value


def to_python(entries: Entries | MapNode, *, config: CodecConfig | None = None) -> dict[str, Any]:
    """Convert a value tree to nested dicts of ``str`` and ``int``.

    Args:
        entries: Decoded entries or a MapNode
        config: Codec configuration (only max_depth is used)

    Returns:
        Plain dictionary suitable for ``json.dumps``

    Raises:
        DepthExceededError: If maps are nested deeper than config.max_depth

    Example:
        >>> to_python({"appid": NumberNode(440)})
        {'appid': 440}
    """
    if isinstance(entries, MapNode):
        entries = entries.entries

    return _to_dict(entries, 0, resolve(config))


def from_python(obj: Mapping[str, Any], *, config: CodecConfig | None = None) -> Entries:
    """Convert nested dicts of ``str`` and ``int`` to a value tree.

    Nodes already present in ``obj`` are kept as they are.

    Args:
        obj: Mapping with string keys
        config: Codec configuration (only max_depth is used)

    Returns:
        Entries ready for ``encode``

    Raises:
        EncodeError: If a key is not a string, a value has an unsupported type,
            or an integer does not fit in an unsigned 32-bit number
        DepthExceededError: If mappings are nested deeper than config.max_depth
    """
    return _from_mapping(obj, 0, resolve(config))


def _to_dict(entries: Entries, depth: int, config: CodecConfig) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, node in entries.items():
        if isinstance(node, MapNode):
            if depth + 1 > config.max_depth:
                raise DepthExceededError(config.max_depth)
            result[key] = _to_dict(node.entries, depth + 1, config)
        elif isinstance(node, (StringNode, NumberNode)):
            result[key] = node.value
        else:
            raise TypeError(f"Key {key!r}: not a value node: {type(node).__name__}")
    return result


def _from_mapping(obj: Mapping[str, Any], depth: int, config: CodecConfig) -> Entries:
    if not isinstance(obj, Mapping):
        raise EncodeError(f"Expected a mapping, got {type(obj).__name__}")

    entries: Entries = {}
    for key, value in obj.items():
        if not isinstance(key, str):
            raise EncodeError(f"Map keys must be str, got {type(key).__name__}: {key!r}")
        entries[key] = _to_node(key, value, depth, config)
    return entries


def _to_node(key: str, value: Any, depth: int, config: CodecConfig) -> Value:
    if isinstance(value, (MapNode, StringNode, NumberNode)):
        return value

    if isinstance(value, Mapping):
        if depth + 1 > config.max_depth:
            raise DepthExceededError(config.max_depth)
        return MapNode(_from_mapping(value, depth + 1, config))

    if isinstance(value, str):
        return StringNode(value)

    # bool is an int subclass but has no wire representation
    if isinstance(value, int) and not isinstance(value, bool):
        if value < 0 or value > U32_MAX:
            raise EncodeError(f"Key {key!r}: value {value} out of bounds [0, {U32_MAX}]")
        return NumberNode(value)

    raise EncodeError(f"Key {key!r}: unsupported type {type(value).__name__}")
