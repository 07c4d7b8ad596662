"""Configuration for the binary VDF codec.

This module provides the limits and text handling shared by the encoder and the
decoder.
"""

from __future__ import annotations

import codecs
import sys
from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 128

# Interpreter frames budgeted per nesting level; leaves room for the caller's stack
FRAMES_PER_LEVEL = 4


def max_depth_limit() -> int:
    """Return the largest max_depth the current recursion limit can serve."""
    return sys.getrecursionlimit() // FRAMES_PER_LEVEL


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for encoding and decoding.

    Attributes:
        max_depth: Maximum number of nested maps below the top-level map
            (default 128). Decoding or encoding a deeper tree raises
            DepthExceededError instead of exhausting the Python call stack.
            Must not exceed ``max_depth_limit()``, a quarter of
            ``sys.getrecursionlimit()`` (250 with the default limit).

        encoding: Text codec for keys and string values (default "utf-8").
            Always used with the ``surrogateescape`` error handler so that
            strings which are not valid in this codec still round-trip
            byte-for-byte. Codecs that emit NUL bytes for ordinary text
            (utf-16, utf-32) are rejected since NUL terminates strings.

    Examples:
        ```python
        from vdfbin import CodecConfig, decode

        # Reject anything nested more than 8 levels
        tree = decode(data, config=CodecConfig(max_depth=8))

        # Legacy files written with a Windows code page
        tree = decode(data, config=CodecConfig(encoding="cp1252"))
        ```
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")

        limit = max_depth_limit()
        if self.max_depth > limit:
            raise ValueError(
                f"max_depth must be <= {limit} for recursion limit "
                f"{sys.getrecursionlimit()}, got {self.max_depth}"
            )

        try:
            codecs.lookup(self.encoding)
        except LookupError as err:
            raise ValueError(f"Unknown encoding: {self.encoding}") from err

        if 0 in self.encode_text("a"):
            raise ValueError(f"Encoding {self.encoding} produces NUL bytes for plain text")

    def decode_text(self, raw: bytes) -> str:
        return raw.decode(self.encoding, "surrogateescape")

    def encode_text(self, text: str) -> bytes:
        return text.encode(self.encoding, "surrogateescape")


DEFAULT_CONFIG = CodecConfig()


def resolve(config: CodecConfig | None) -> CodecConfig:
    return config if config is not None else DEFAULT_CONFIG
