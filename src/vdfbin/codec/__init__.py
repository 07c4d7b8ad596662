"""Binary VDF codec for vdfbin.

This module provides encoding and decoding between binary VDF data and value
trees.
"""

from __future__ import annotations

from .config import CodecConfig
from .cursor import Cursor
from .decoder import MapItem, decode
from .encoder import encode
from .tags import Tag

__all__ = [
    "encode",
    "decode",
    "CodecConfig",
    "Cursor",
    "MapItem",
    "Tag",
]
