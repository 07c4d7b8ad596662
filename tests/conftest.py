"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from vdfbin import MapNode, NumberNode, StringNode
from vdfbin.models import Entries


@pytest.fixture
def string_item() -> bytes:
    """A single string item: key -> "value"."""
    return b"\x01key\x00value\x00"


@pytest.fixture
def number_item() -> bytes:
    """A single number item: key -> 3."""
    return b"\x02key\x00\x03\x00\x00\x00"


@pytest.fixture
def map_item() -> bytes:
    """A single map item: key1 -> {key2: "value1", key3: "value2"}."""
    return b"\x00key1\x00" b"\x01key2\x00value1\x00" b"\x01key3\x00value2\x00" b"\x08"


@pytest.fixture
def flat_document() -> bytes:
    """Top-level map with a string and a number."""
    return b"\x01key1\x00value1\x00" b"\x02key2\x00\x03\x00\x00\x00" b"\x08"


@pytest.fixture
def nested_document() -> bytes:
    """Top-level map with a string, a number and a nested map."""
    return (
        b"\x01key1\x00value1\x00"
        b"\x02key2\x00\x03\x00\x00\x00"
        b"\x00key3\x00"
        b"\x01key4\x00value2\x00"
        b"\x01key5\x00value3\x00"
        b"\x08"
        b"\x08"
    )


@pytest.fixture
def nested_tree() -> Entries:
    """Decoded form of nested_document."""
    return {
        "key1": StringNode("value1"),
        "key2": NumberNode(3),
        "key3": MapNode(
            {
                "key4": StringNode("value2"),
                "key5": StringNode("value3"),
            }
        ),
    }
