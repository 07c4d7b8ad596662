"""Wire tag bytes of the binary VDF format."""

from __future__ import annotations

import enum


class Tag(enum.IntEnum):
    """One-byte type tag preceding every map item.

    MAP_END carries no key and no payload; it terminates the enclosing map.
    """

    MAP_START = 0x00
    STRING = 0x01
    NUMBER = 0x02
    MAP_END = 0x08


NUL = 0x00
NUMBER_SIZE = 4
