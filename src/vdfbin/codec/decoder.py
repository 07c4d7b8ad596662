"""Binary VDF decoder.

This module provides the decode() function that converts binary VDF data into
a tree of MapNode, StringNode and NumberNode values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, cast

from ..exceptions import DepthExceededError, UnrecognizedTagError
from ..models.nodes import Entries, MapNode, NumberNode, StringNode, Value
from .config import DEFAULT_CONFIG, CodecConfig, resolve
from .cursor import Cursor
from .tags import Tag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapItem:
    """One item read while scanning a map.

    ``name`` and ``value`` are None only for the MAP_END terminator.
    """

    tag: int
    name: Optional[str] = None
    value: Optional[Value] = None

    @property
    def is_end(self) -> bool:
        return self.tag == Tag.MAP_END


def decode(
    data: bytes | bytearray | memoryview, *, config: CodecConfig | None = None
) -> Entries:
    """Decode binary VDF data into a value tree.

    The data must start with the items of the top-level map and contain its
    MAP_END terminator. Bytes after the terminator are ignored.

    Args:
        data: Binary data to decode
        config: Codec configuration (defaults to CodecConfig())

    Returns:
        Entries of the top-level map

    Raises:
        UnexpectedEofError: If data is truncated
        UnrecognizedTagError: If a tag byte is not part of the format
        DepthExceededError: If maps are nested deeper than config.max_depth

    Examples:
        ```python
        from vdfbin import decode

        with open("shortcuts.vdf", "rb") as f:
            tree = decode(f.read())

        for key, node in tree.items():
            print(key, node)
        ```
    """
    config = resolve(config)
    cursor = Cursor(data)

    entries = decode_map(cursor, config=config)

    if cursor.remaining():
        logger.debug(
            "Ignoring %d trailing bytes after top-level map at offset %d",
            cursor.remaining(),
            cursor.position,
        )

    return entries


def decode_map(cursor: Cursor, depth: int = 0, config: CodecConfig = DEFAULT_CONFIG) -> Entries:
    """Decode map items until the map's MAP_END terminator.

    Duplicate keys overwrite earlier ones.

    Args:
        cursor: Cursor positioned at the first item of the map
        depth: Nesting depth of this map (0 for the top-level map)
        config: Codec configuration

    Returns:
        Entries of the map
    """
    entries: Entries = {}

    while True:
        item = decode_item(cursor, depth, config)
        if item.is_end:
            return entries

        entries[cast(str, item.name)] = cast(Value, item.value)


def decode_item(
    cursor: Cursor, depth: int = 0, config: CodecConfig = DEFAULT_CONFIG
) -> MapItem:
    """Decode a single map item: tag, then name, then the tagged payload.

    Args:
        cursor: Cursor positioned at a tag byte
        depth: Nesting depth of the map containing this item
        config: Codec configuration

    Returns:
        The decoded item (without name and value for MAP_END)

    Raises:
        UnexpectedEofError: If data is truncated
        UnrecognizedTagError: If the tag byte is not part of the format
        DepthExceededError: If a nested map exceeds config.max_depth
    """
    tag_position = cursor.position
    tag = cursor.peek_tag()

    if tag == Tag.MAP_END:
        return MapItem(Tag.MAP_END)

    # Reject unknown tags before reading a name that may not exist
    if tag not in (Tag.MAP_START, Tag.STRING, Tag.NUMBER):
        raise UnrecognizedTagError(tag, tag_position)

    name = config.decode_text(cursor.read_cstring())

    value: Value
    if tag == Tag.MAP_START:
        if depth + 1 > config.max_depth:
            raise DepthExceededError(config.max_depth)
        value = MapNode(decode_map(cursor, depth + 1, config))
    elif tag == Tag.STRING:
        value = StringNode(config.decode_text(cursor.read_cstring()))
    else:
        value = NumberNode(cursor.read_u32_le())

    return MapItem(Tag(tag), name, value)
