"""Binary VDF encoder.

This module provides the encode() function that converts a tree of MapNode,
StringNode and NumberNode values to binary VDF data.
"""

from __future__ import annotations

import struct

from ..exceptions import DepthExceededError, EmbeddedNulError, EncodeError
from ..models.nodes import Entries, MapNode, NumberNode, StringNode
from .config import DEFAULT_CONFIG, CodecConfig, resolve
from .tags import NUL, Tag

_U32_LE = struct.Struct("<I")


def encode(entries: Entries | MapNode, *, config: CodecConfig | None = None) -> bytes:
    """Encode a value tree to binary VDF data.

    Entries are written in iteration order and every map, including the
    top-level one, is terminated with a MAP_END byte.

    Args:
        entries: Entries of the top-level map, or a MapNode
        config: Codec configuration (defaults to CodecConfig())

    Returns:
        Binary VDF representation

    Raises:
        EmbeddedNulError: If a key or string value contains NUL
        DepthExceededError: If maps are nested deeper than config.max_depth
        EncodeError: If a value is not a node or text cannot be encoded

    Examples:
        ```python
        from vdfbin import MapNode, NumberNode, StringNode, encode

        data = encode({
            "appid": NumberNode(440),
            "name": StringNode("Team Fortress 2"),
            "tags": MapNode({"0": StringNode("fps")}),
        })
        ```
    """
    if isinstance(entries, MapNode):
        entries = entries.entries

    return encode_map(entries, config=resolve(config))


def encode_map(entries: Entries, depth: int = 0, config: CodecConfig = DEFAULT_CONFIG) -> bytes:
    """Encode the items of one map followed by its MAP_END byte.

    Args:
        entries: Entries of the map
        depth: Nesting depth of this map (0 for the top-level map)
        config: Codec configuration

    Returns:
        Encoded map including the terminator
    """
    buffer = bytearray()

    for key, value in entries.items():
        if isinstance(value, NumberNode):
            chunk = encode_key_tag(Tag.NUMBER, key, config) + _U32_LE.pack(value.value)
        elif isinstance(value, StringNode):
            chunk = encode_key_tag(Tag.STRING, key, config) + encode_cstring(value.value, config)
        elif isinstance(value, MapNode):
            if depth + 1 > config.max_depth:
                raise DepthExceededError(config.max_depth)
            chunk = encode_key_tag(Tag.MAP_START, key, config) + encode_map(
                value.entries, depth + 1, config
            )
        else:
            raise EncodeError(
                f"Key {key!r}: expected MapNode, StringNode or NumberNode, "
                f"got {type(value).__name__}"
            )

        buffer.extend(chunk)

    buffer.append(Tag.MAP_END)
    return bytes(buffer)


def encode_key_tag(tag: Tag, key: str, config: CodecConfig = DEFAULT_CONFIG) -> bytes:
    """Encode a tag byte followed by a NUL-terminated key.

    Example:
        >>> encode_key_tag(Tag.STRING, "key1")
        b'\\x01key1\\x00'
    """
    return bytes([tag]) + encode_cstring(key, config)


def encode_cstring(text: str, config: CodecConfig = DEFAULT_CONFIG) -> bytes:
    """Encode text followed by a NUL terminator.

    Text must read back unchanged. Surrogate escapes that spell a valid
    sequence in config.encoding (e.g. "\\udcc3\\udca9", which is UTF-8 for "é")
    are rejected since they would decode as different text.

    Raises:
        EmbeddedNulError: If the encoded text contains a NUL byte
        EncodeError: If the text cannot be represented in config.encoding
    """
    try:
        raw = config.encode_text(text)
    except UnicodeEncodeError as e:
        raise EncodeError(f"Cannot encode {text!r} as {config.encoding}: {e}") from e

    if NUL in raw:
        raise EmbeddedNulError(f"NUL terminator found in {text!r}")

    if config.decode_text(raw) != text:
        raise EncodeError(
            f"Cannot encode {text!r} as {config.encoding}: would decode as "
            f"{config.decode_text(raw)!r}"
        )

    return raw + b"\x00"
