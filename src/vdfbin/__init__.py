"""vdfbin: Binary VDF Codec

A Python library for reading and writing the binary VDF format, the tagged,
nested key-value records used by Steam (``shortcuts.vdf``, ``appinfo`` style
maps and similar files).

Key Features:
- Pydantic-based value tree (MapNode, StringNode, NumberNode)
- Bounds-checked decoding: truncated or malformed input raises, never crashes
- Explicit nesting limit for hostile input
- JSON conversion helpers and a small CLI

Quick Start:
    >>> from vdfbin import MapNode, NumberNode, StringNode, decode, encode
    >>>
    >>> tree = {
    ...     "key1": StringNode("value1"),
    ...     "key2": NumberNode(3),
    ...     "key3": MapNode({"key4": StringNode("value2")}),
    ... }
    >>> data = encode(tree)
    >>> decode(data) == tree
    True
"""

from __future__ import annotations

from .codec import CodecConfig, Tag, decode, encode
from .exceptions import (
    DecodeError,
    DepthExceededError,
    EmbeddedNulError,
    EncodeError,
    UnexpectedEofError,
    UnrecognizedTagError,
    VdfError,
)
from .models import Entries, MapNode, NumberNode, StringNode, Value, from_python, to_python
from .utils import encoded_size, field_sizes

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "CodecConfig",
    "Tag",
    # Value tree
    "Entries",
    "MapNode",
    "NumberNode",
    "StringNode",
    "Value",
    "from_python",
    "to_python",
    # Exceptions
    "VdfError",
    "DecodeError",
    "EncodeError",
    "UnexpectedEofError",
    "UnrecognizedTagError",
    "EmbeddedNulError",
    "DepthExceededError",
    # Sizing
    "encoded_size",
    "field_sizes",
    # Version
    "__version__",
]
