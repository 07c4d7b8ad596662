"""Encoded size calculation utilities.

This module provides functions to calculate the encoded size of a value tree
without actually encoding it.
"""

from __future__ import annotations

from ..codec.config import CodecConfig, resolve
from ..codec.tags import NUMBER_SIZE
from ..exceptions import DepthExceededError, EncodeError
from ..models.nodes import Entries, MapNode, NumberNode, StringNode

_TAG_SIZE = 1
_NUL_SIZE = 1


def encoded_size(entries: Entries | MapNode, *, config: CodecConfig | None = None) -> int:
    """Calculate the encoded size of a value tree in bytes.

    The result equals ``len(encode(entries))`` for any tree that encodes
    successfully. NUL characters are not checked.

    Args:
        entries: Entries of the top-level map, or a MapNode
        config: Codec configuration (text encoding and nesting limit)

    Returns:
        Size in bytes, including the top-level MAP_END byte

    Raises:
        EncodeError: If a value is not a node
        DepthExceededError: If maps are nested deeper than config.max_depth

    Example:
        >>> encoded_size({"key": StringNode("value")})
        12  # tag + "key\\0" + "value\\0" + map end
    """
    if isinstance(entries, MapNode):
        entries = entries.entries

    config = resolve(config)
    return _map_size(entries, 0, config)


def field_sizes(entries: Entries | MapNode, *, config: CodecConfig | None = None) -> dict[str, int]:
    """Get the encoded size in bytes of each top-level entry.

    Each size covers the tag byte, the key and the payload. The top-level
    MAP_END byte is not attributed to any entry.

    Example:
        >>> field_sizes({"appid": NumberNode(440)})
        {'appid': 11}
    """
    if isinstance(entries, MapNode):
        entries = entries.entries

    config = resolve(config)
    return {key: _entry_size(key, value, 0, config) for key, value in entries.items()}


def _map_size(entries: Entries, depth: int, config: CodecConfig) -> int:
    size = _TAG_SIZE
    for key, value in entries.items():
        size += _entry_size(key, value, depth, config)
    return size


def _entry_size(key: str, value: object, depth: int, config: CodecConfig) -> int:
    size = _TAG_SIZE + _text_size(key, config)

    if isinstance(value, NumberNode):
        return size + NUMBER_SIZE
    if isinstance(value, StringNode):
        return size + _text_size(value.value, config)
    if isinstance(value, MapNode):
        if depth + 1 > config.max_depth:
            raise DepthExceededError(config.max_depth)
        return size + _map_size(value.entries, depth + 1, config)

    raise EncodeError(f"Key {key!r}: unsupported type {type(value).__name__}")


def _text_size(text: str, config: CodecConfig) -> int:
    try:
        return len(config.encode_text(text)) + _NUL_SIZE
    except UnicodeEncodeError as e:
        raise EncodeError(f"Cannot encode {text!r} as {config.encoding}: {e}") from e
