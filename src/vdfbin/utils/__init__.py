"""Utility functions for vdfbin.

This module provides size calculation for value trees.
"""

from __future__ import annotations

from .sizing import encoded_size, field_sizes

__all__ = [
    "encoded_size",
    "field_sizes",
]
