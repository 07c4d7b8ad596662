"""Exception hierarchy for vdfbin.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from VdfError for easy catching of any vdfbin-specific error.
"""

from __future__ import annotations


class VdfError(Exception):
    """Base exception for all vdfbin errors."""

    pass


class DecodeError(VdfError):
    """Raised when decoding binary VDF data fails.

    Examples:
        - Truncated data (missing tag byte, short number, unterminated string)
        - Unrecognized tag byte
        - Nesting deeper than the configured limit
    """

    pass


class EncodeError(VdfError):
    """Raised when encoding a value tree fails.

    Examples:
        - Key or string value containing a NUL character
        - Value that is not a MapNode, StringNode or NumberNode
        - Nesting deeper than the configured limit
    """

    pass


class UnexpectedEofError(DecodeError):
    """Raised when a read would consume bytes past the end of the buffer."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at offset {position}")
        self.position = position


class UnrecognizedTagError(DecodeError):
    """Raised when a tag byte is not one of MapStart, String, Number or MapEnd."""

    def __init__(self, tag: int, position: int) -> None:
        super().__init__(f"Unrecognized tag 0x{tag:02x} at offset {position}")
        self.tag = tag
        self.position = position


class EmbeddedNulError(EncodeError):
    """Raised when a key or string value contains a NUL terminator."""

    pass


class DepthExceededError(DecodeError, EncodeError):
    """Raised when maps are nested deeper than ``CodecConfig.max_depth``.

    Subclasses both DecodeError and EncodeError so callers catching either side
    of the codec also catch this.
    """

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"Map nesting exceeds max_depth={max_depth}")
        self.max_depth = max_depth
