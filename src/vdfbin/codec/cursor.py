"""Bounds-checked reading over a byte buffer.

This module provides the Cursor used by the decoder. Every read is checked
against the end of the buffer and fails with UnexpectedEofError instead of
raising IndexError or returning a short result.
"""

from __future__ import annotations

import struct

from ..exceptions import UnexpectedEofError
from .tags import NUL, NUMBER_SIZE

_U32_LE = struct.Struct("<I")


class Cursor:
    """Reads tags, numbers and NUL-terminated strings from a byte buffer.

    The buffer is copied to immutable ``bytes`` on construction; the position
    always stays within ``0 <= position <= len(data)``.

    Example:
        >>> cursor = Cursor(b"\\x02key\\x00\\x03\\x00\\x00\\x00")
        >>> cursor.peek_tag()
        2
        >>> cursor.read_cstring()
        b'key'
        >>> cursor.read_u32_le()
        3
    """

    def __init__(self, data: bytes | bytearray | memoryview, position: int = 0) -> None:
        """Initialize a cursor over the given data.

        Args:
            data: Byte buffer to read
            position: Initial read offset
        """
        self._data = bytes(data)
        if position < 0 or position > len(self._data):
            raise ValueError(f"position must be 0-{len(self._data)}, got {position}")
        self._position = position

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def position(self) -> int:
        """Current read offset in bytes."""
        return self._position

    def remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def peek_tag(self) -> int:
        """Read a single tag byte.

        Despite the name the position advances past the tag.

        Returns:
            The tag byte as an int

        Raises:
            UnexpectedEofError: If the buffer is exhausted
        """
        if self._position >= len(self._data):
            raise UnexpectedEofError("Expected tag byte, found end of data", self._position)

        tag = self._data[self._position]
        self._position += 1
        return tag

    def read_u32_le(self) -> int:
        """Read an unsigned 32-bit little-endian integer.

        Raises:
            UnexpectedEofError: If fewer than 4 bytes remain
        """
        if self.remaining() < NUMBER_SIZE:
            raise UnexpectedEofError(
                f"Not enough bytes for number: need {NUMBER_SIZE}, have {self.remaining()}",
                self._position,
            )

        (value,) = _U32_LE.unpack_from(self._data, self._position)
        self._position += NUMBER_SIZE
        return int(value)

    def read_cstring(self) -> bytes:
        """Read bytes up to the next NUL and skip the NUL.

        Returns:
            The bytes before the terminator

        Raises:
            UnexpectedEofError: If no NUL is found before the end of the buffer.
                The position is left unchanged in that case.
        """
        end = self._data.find(NUL, self._position)
        if end < 0:
            raise UnexpectedEofError("Unterminated string", self._position)

        raw = self._data[self._position : end]
        self._position = end + 1
        return raw
