"""Value tree modeling for vdfbin.

This module provides the node types of a decoded document and helpers to convert
trees to and from plain Python objects.
"""

from __future__ import annotations

from .convert import from_python, to_python
from .nodes import Entries, MapNode, NumberNode, StringNode, Value

__all__ = [
    "Entries",
    "MapNode",
    "NumberNode",
    "StringNode",
    "Value",
    "from_python",
    "to_python",
]
